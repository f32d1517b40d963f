"""
rgb.
===

Does: Model a 24-bit color (`ESC[38;2;r;g;b m`) parsed from hex, `css(<name>)`,
      `xterm(<name>)` or a numeric triplet, remembering the text it came from.
Returns: `Rgb`, an immutable (channels, source) pair.

Notes:
- 3-digit short hex (`#abc`) is not supported and reports `HexWrongLength`.
- A wrong length is checked before digits: `#3245` is a length error,
  `#jjjjjj` a digit error.
"""

from __future__ import annotations

import logging
import re
import string
from dataclasses import dataclass, field, replace
from typing import List, Sequence, Tuple, Union

import webcolors

from .errors import GrammarMismatch, HexWrongLength, InvalidHexDigit, UnknownPaletteName
from .libraries import CSS, XTERM, lookup_by_name, suggest_name, unwrap_name
from .source import SourceTag

__all__ = ["Rgb", "RGB", "FOREGROUND_RGB", "BACKGROUND_RGB", "TRUECOLOR_MODE"]
__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
RGB = Tuple[int, int, int]

FOREGROUND_RGB = 38
BACKGROUND_RGB = 48
TRUECOLOR_MODE = 2

_TRIPLET_PATTERN = re.compile(r"^\[\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\]$")
_BARE_HEX_PATTERN = re.compile(r"^[0-9a-fA-F]{6}$")
_HEX_DIGITS = frozenset(string.hexdigits)


def _valid_channel(v: object) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and 0 <= v <= 255


def _as_triplet(value: object) -> RGB | None:
    """Return `value` as an RGB tuple when it is a 3-sequence of channel ints."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return None
    if len(value) != 3 or not all(_valid_channel(v) for v in value):
        return None
    return (value[0], value[1], value[2])


@dataclass(frozen=True)
class Rgb:
    """An RGB triplet; `source` is serialization metadata and never part of equality."""

    channels: RGB = (0, 0, 0)
    source: SourceTag = field(default_factory=SourceTag, compare=False)

    def __post_init__(self) -> None:
        triplet = _as_triplet(self.channels)
        if triplet is None:
            raise ValueError(f"RGB channels must be three ints in 0-255, got {self.channels!r}")
        object.__setattr__(self, "channels", triplet)

    # ── Constructors ─────────────────────────────────────────────────────────
    @classmethod
    def from_channels(cls, channels: Sequence[int]) -> Rgb:
        return cls(tuple(channels))  # type: ignore[arg-type]

    @classmethod
    def from_hex(cls, text: str) -> Rgb:
        """Does: Parse `#rrggbb` or `rrggbb`; the text as given becomes the active source.

        Raises:
            HexWrongLength: not exactly 6 digits after stripping `#`.
            InvalidHexDigit: 6 characters, but not all hexadecimal.
        """
        digits = text[1:] if text.startswith("#") else text
        if len(digits) != 6:
            raise HexWrongLength(text)
        if not _HEX_DIGITS.issuperset(digits):
            raise InvalidHexDigit(text)
        rgb = webcolors.hex_to_rgb(f"#{digits}")
        return cls(tuple(rgb), SourceTag.active(text))  # type: ignore[arg-type]

    @classmethod
    def from_css_name(cls, name: str) -> Rgb:
        return cls._from_library(CSS, name)

    @classmethod
    def from_xterm_name(cls, name: str) -> Rgb:
        return cls._from_library(XTERM, name)

    @classmethod
    def _from_library(cls, library: str, name: str) -> Rgb:
        entry = lookup_by_name(library, name)
        if entry is None:
            raise UnknownPaletteName(library, name, suggest_name(library, name))
        return cls(entry.rgb, SourceTag.active(entry.name, library))

    @classmethod
    def from_str(cls, text: str) -> Rgb:
        """Does: Dispatch on shape: `#hex` or bare 6-digit hex, `css(<name>)`, `xterm(<name>)`, `[r, g, b]`."""
        stripped = text.strip()
        if stripped.startswith("#") or _BARE_HEX_PATTERN.match(stripped):
            return cls.from_hex(stripped)
        for library in (CSS, XTERM):
            name = unwrap_name(library, stripped)
            if name is not None:
                return cls._from_library(library, name)
        m = _TRIPLET_PATTERN.match(stripped)
        if m:
            triplet = _as_triplet(tuple(int(g) for g in m.groups()))
            if triplet is not None:
                return cls(triplet)
        raise GrammarMismatch(text, "#rrggbb, css(<name>), xterm(<name>) or [r, g, b]")

    # ── Builders ─────────────────────────────────────────────────────────────
    def with_channels(self, channels: Sequence[int]) -> Rgb:
        """Does: Replace the channels; the old source no longer describes them, so deactivate it."""
        return Rgb(tuple(channels), self.source.to_inactive())  # type: ignore[arg-type]

    def with_source(self, origin: str, library: str = "") -> Rgb:
        """Does: Serialize this value as `origin` (a hex literal or `library(origin)`)."""
        if library:
            if lookup_by_name(library, origin) is None:
                raise UnknownPaletteName(library, origin, suggest_name(library, origin))
        else:
            Rgb.from_hex(origin)
        return replace(self, source=SourceTag.active(origin, library))

    def activate_source(self) -> Rgb:
        return replace(self, source=self.source.to_active())

    def deactivate_source(self) -> Rgb:
        return replace(self, source=self.source.to_inactive())

    # ── Conversions ──────────────────────────────────────────────────────────
    def to_hex(self) -> str:
        return webcolors.rgb_to_hex(self.channels)

    def escape_fragment(self, is_background: bool) -> List[int]:
        r, g, b = self.channels
        return [BACKGROUND_RGB if is_background else FOREGROUND_RGB, TRUECOLOR_MODE, r, g, b]

    # ── Serialization ────────────────────────────────────────────────────────
    def to_value(self) -> Union[str, List[int]]:
        if self.source.is_active:
            return self.source.wrapped()
        return list(self.channels)

    @classmethod
    def from_value(cls, value: object) -> Rgb:
        """Does: Accept either serialized form: source text or a 3-element sequence."""
        if isinstance(value, Rgb):
            return value
        if isinstance(value, str):
            return cls.from_str(value)
        triplet = _as_triplet(value)
        if triplet is not None:
            return cls(triplet)
        log.debug("Rejected RGB payload %r", value)
        raise GrammarMismatch(value, "#rrggbb, css(<name>), xterm(<name>) or [r, g, b]")

    def __str__(self) -> str:
        return str(self.to_value())
