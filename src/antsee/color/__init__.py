"""
color.
=====

Does: Aggregate the color model: palette tables, the source tag, the three
      concrete variants (Ansi / Fixed / Rgb), the grammar dispatcher, and the
      `Color` resolver that picks a tier for a terminal capability.
Used By: `antsee.style`, `antsee.theme`, library users.
Returns: Immutable value types and pure functions; no I/O.
"""

# ── Errors ───────────────────────────────────────────────────────────────────
from .errors import (
    ColorParseError,
    GrammarMismatch,
    HexWrongLength,
    InvalidHexDigit,
    UnknownNamedColor,
    UnknownPaletteName,
)

# ── Tables & source ──────────────────────────────────────────────────────────
from .libraries import PaletteEntry, css_colors, lookup_by_index, lookup_by_name, xterm_colors
from .source import SourceTag

# ── Variants ─────────────────────────────────────────────────────────────────
from .ansi import Ansi
from .fixed import Fixed
from .rgb import Rgb
from .value import ColorValue, Tier, parse_color_value, serialize_color_value, tier_of

# ── Resolver ─────────────────────────────────────────────────────────────────
from .resolver import BASIC, EXTENDED, TRUECOLOR, Capability, Color, ColorLevels

__all__ = [
    # errors
    "ColorParseError",
    "GrammarMismatch",
    "UnknownPaletteName",
    "HexWrongLength",
    "InvalidHexDigit",
    "UnknownNamedColor",
    # tables & source
    "PaletteEntry",
    "css_colors",
    "xterm_colors",
    "lookup_by_name",
    "lookup_by_index",
    "SourceTag",
    # variants
    "Ansi",
    "Fixed",
    "Rgb",
    "ColorValue",
    "Tier",
    "tier_of",
    "parse_color_value",
    "serialize_color_value",
    # resolver
    "Capability",
    "BASIC",
    "EXTENDED",
    "TRUECOLOR",
    "ColorLevels",
    "Color",
]
__docformat__ = "google"
