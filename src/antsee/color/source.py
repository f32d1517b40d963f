"""
source.
======

Does: Track where a Fixed/Rgb value came from (a palette name or a hex literal)
      so serialization can hand the same text back.
Returns: `SourceTag`, an immutable active/inactive tag carrying the origin string.

Notes:
- Only `is_active` decides whether the origin is serialized. An inactive tag
  still carries its origin so it can be re-activated later.
- `library` is "css" or "xterm" for palette names, "" for literals (hex).
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .libraries import wrap_name

__all__ = ["SourceTag"]
__docformat__ = "google"


@dataclass(frozen=True)
class SourceTag:
    origin: str = ""
    is_active: bool = False
    library: str = ""

    @classmethod
    def active(cls, origin: str, library: str = "") -> SourceTag:
        return cls(origin=origin, is_active=True, library=library)

    @classmethod
    def inactive(cls, origin: str = "", library: str = "") -> SourceTag:
        return cls(origin=origin, is_active=False, library=library)

    def to_active(self) -> SourceTag:
        return self if self.is_active else replace(self, is_active=True)

    def to_inactive(self) -> SourceTag:
        return replace(self, is_active=False) if self.is_active else self

    def wrapped(self) -> str:
        """Does: Return the serialized origin: `library(name)` or the bare literal."""
        if self.library:
            return wrap_name(self.library, self.origin)
        return self.origin
