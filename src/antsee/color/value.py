"""
value.
=====

Does: Tie the three concrete color variants together: the `ColorValue` union,
      the `Tier` each variant lives on, and the grammar dispatcher that turns
      any config payload (text, index, triplet) into one concrete value.
Used By: `Color` (tier routing, (de)serialization), `Style` builders, themes.

Grammar:
    "#a6fc35"         -> Rgb   (source "#a6fc35")
    "a6fc35"          -> Rgb   (source "a6fc35")
    "css(red)"        -> Rgb   (source "red")
    "xterm(Seafoam)"  -> Fixed (source "Seafoam")
    160 / "160"       -> Fixed (no source)
    "BrightRed"       -> Ansi  (case-insensitive; any other bare name is UnknownNamedColor)
    [166, 252, 53]    -> Rgb   (no source)
"""

from __future__ import annotations

import re
from enum import Enum
from typing import List, Union

from .ansi import Ansi
from .errors import GrammarMismatch
from .fixed import Fixed
from .libraries import CSS, XTERM, unwrap_name
from .rgb import Rgb

__all__ = ["ColorValue", "Tier", "tier_of", "parse_color_value", "serialize_color_value"]
__docformat__ = "google"

ColorValue = Union[Ansi, Fixed, Rgb]

_EXPECTED = "a color name, #hex, css(<name>), xterm(<name>), palette index or [r, g, b]"
_BARE_HEX = re.compile(r"^[0-9a-fA-F]{6}$")


class Tier(Enum):
    ANSI16 = "ansi16"
    ANSI256 = "ansi256"
    RGB = "rgb"


def tier_of(value: ColorValue) -> Tier:
    """Does: Map a concrete value to the tier it belongs to."""
    if isinstance(value, Ansi):
        return Tier.ANSI16
    if isinstance(value, Fixed):
        return Tier.ANSI256
    if isinstance(value, Rgb):
        return Tier.RGB
    raise TypeError(f"not a color value: {value!r}")


def _parse_text(text: str) -> ColorValue:
    stripped = text.strip()
    if stripped.startswith("#") or _BARE_HEX.match(stripped):
        return Rgb.from_hex(stripped)
    if unwrap_name(CSS, stripped) is not None:
        return Rgb.from_str(stripped)
    name = unwrap_name(XTERM, stripped)
    if name is not None:
        return Fixed.from_palette_name(name)
    if stripped.isdecimal():
        return Fixed.from_str(stripped)
    if stripped.startswith("["):
        return Rgb.from_str(stripped)
    if stripped.isidentifier():
        return Ansi.from_name(stripped)
    raise GrammarMismatch(text, _EXPECTED)


def parse_color_value(value: object) -> ColorValue:
    """Does: Turn any accepted payload into exactly one concrete color value.

    Raises:
        ColorParseError: one of its subclasses, naming why the payload was rejected.
    """
    if isinstance(value, (Ansi, Fixed, Rgb)):
        return value
    if isinstance(value, str):
        return _parse_text(value)
    if isinstance(value, bool):
        raise GrammarMismatch(value, _EXPECTED)
    if isinstance(value, int):
        return Fixed.from_value(value)
    if isinstance(value, (list, tuple)):
        return Rgb.from_value(value)
    raise GrammarMismatch(value, _EXPECTED)


def serialize_color_value(value: ColorValue) -> Union[str, int, List[int]]:
    """Does: Return the config form of a value (source text when active, numbers otherwise)."""
    return value.to_value()
