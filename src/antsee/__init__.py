"""
antsee
======

Does: Root package for a terminal color/style library that never writes to the
      terminal itself: it models colors and text attributes, resolves them for a
      caller-supplied terminal capability, and renders ANSI escape strings.
Returns: The public surface of `antsee.color`, `antsee.style` and `antsee.theme`.
Used by: Configuration formats and CLI tools that let users describe colors by
         name, hex or palette index and want those spellings preserved.
"""

from .color import (
    BASIC,
    EXTENDED,
    TRUECOLOR,
    Ansi,
    Capability,
    Color,
    ColorLevels,
    ColorParseError,
    Fixed,
    GrammarMismatch,
    HexWrongLength,
    InvalidHexDigit,
    Rgb,
    SourceTag,
    UnknownNamedColor,
    UnknownPaletteName,
    parse_color_value,
)
from .style import Attribute, Attributes, Style, StyledString
from .theme import ThemeError, dump_theme, load_theme

__all__ = [
    "Ansi",
    "Fixed",
    "Rgb",
    "SourceTag",
    "Color",
    "ColorLevels",
    "Capability",
    "BASIC",
    "EXTENDED",
    "TRUECOLOR",
    "parse_color_value",
    "ColorParseError",
    "GrammarMismatch",
    "UnknownPaletteName",
    "HexWrongLength",
    "InvalidHexDigit",
    "UnknownNamedColor",
    "Attribute",
    "Attributes",
    "Style",
    "StyledString",
    "ThemeError",
    "load_theme",
    "dump_theme",
]
__docformat__ = "google"
