"""
fixed.
=====

Does: Model a 256-color palette value (`ESC[38;5;n m`) that remembers whether it
      was picked by xterm name, so `xterm(Seafoam)` serializes back unchanged.
Returns: `Fixed`, an immutable (index, source) pair.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, List, Union

from .errors import GrammarMismatch, UnknownPaletteName
from .libraries import XTERM, PaletteEntry, lookup_by_index, lookup_by_name, suggest_name, unwrap_name
from .source import SourceTag

if TYPE_CHECKING:
    from .rgb import Rgb

__all__ = ["Fixed", "FOREGROUND_256", "BACKGROUND_256", "PALETTE_MODE"]
__docformat__ = "google"

log = logging.getLogger(__name__)

FOREGROUND_256 = 38
BACKGROUND_256 = 48
PALETTE_MODE = 5


def _check_index(index: object) -> bool:
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index <= 255


@dataclass(frozen=True)
class Fixed:
    """A palette index; `source` is serialization metadata and never part of equality."""

    index: int = 0
    source: SourceTag = field(default_factory=SourceTag, compare=False)

    def __post_init__(self) -> None:
        if not _check_index(self.index):
            raise ValueError(f"palette index must be an int in 0-255, got {self.index!r}")

    # ── Constructors ─────────────────────────────────────────────────────────
    @classmethod
    def from_index(cls, index: int) -> Fixed:
        return cls(index)

    @classmethod
    def from_palette_name(cls, name: str) -> Fixed:
        """Does: Look `name` up in the xterm table; the name becomes the active source.

        Raises:
            UnknownPaletteName: the name is not in the xterm table.
        """
        entry = lookup_by_name(XTERM, name)
        if entry is None:
            raise UnknownPaletteName(XTERM, name, suggest_name(XTERM, name))
        return cls(entry.index, SourceTag.active(entry.name, XTERM))

    @classmethod
    def from_str(cls, text: str) -> Fixed:
        """Does: Parse `xterm(<name>)` or a bare decimal index such as `"160"`."""
        name = unwrap_name(XTERM, text)
        if name is not None:
            return cls.from_palette_name(name)
        stripped = text.strip()
        if stripped.isdecimal() and _check_index(int(stripped)):
            return cls(int(stripped))
        raise GrammarMismatch(text, "xterm(<name>) or a palette index 0-255")

    # ── Builders ─────────────────────────────────────────────────────────────
    def with_index(self, index: int) -> Fixed:
        """Does: Replace the index; the old source no longer describes it, so deactivate it."""
        return Fixed(index, self.source.to_inactive())

    def with_source(self, name: str) -> Fixed:
        """Does: Serialize this value as `xterm(name)` from now on, keeping the index."""
        if lookup_by_name(XTERM, name) is None:
            raise UnknownPaletteName(XTERM, name, suggest_name(XTERM, name))
        return replace(self, source=SourceTag.active(name, XTERM))

    def activate_source(self) -> Fixed:
        return replace(self, source=self.source.to_active())

    def deactivate_source(self) -> Fixed:
        return replace(self, source=self.source.to_inactive())

    # ── Conversions ──────────────────────────────────────────────────────────
    def palette_entry(self) -> PaletteEntry:
        return lookup_by_index(self.index)

    def to_rgb(self) -> Rgb:
        """Does: Return the palette entry's RGB, keeping this value's source tag."""
        from .rgb import Rgb

        return Rgb(self.palette_entry().rgb, self.source)

    def escape_fragment(self, is_background: bool) -> List[int]:
        return [BACKGROUND_256 if is_background else FOREGROUND_256, PALETTE_MODE, self.index]

    # ── Serialization ────────────────────────────────────────────────────────
    def to_value(self) -> Union[str, int]:
        if self.source.is_active:
            return self.source.wrapped()
        return self.index

    @classmethod
    def from_value(cls, value: object) -> Fixed:
        """Does: Accept either serialized form: `xterm(<name>)` text or an int index."""
        if isinstance(value, Fixed):
            return value
        if isinstance(value, str):
            return cls.from_str(value)
        if _check_index(value):
            return cls(value)  # type: ignore[arg-type]
        log.debug("Rejected palette payload %r", value)
        raise GrammarMismatch(value, "xterm(<name>) or a palette index 0-255")

    def __str__(self) -> str:
        return str(self.to_value())
