"""
ansi.
====

Does: Model the 16 basic terminal colors (plus the terminal default) as an Enum.
Returns: `Ansi`, parseable from its name and able to emit one SGR code.
"""

from __future__ import annotations

from enum import Enum
from typing import List

from .errors import GrammarMismatch, UnknownNamedColor

__all__ = ["Ansi", "BACKGROUND_OFFSET"]
__docformat__ = "google"

# Background SGR codes sit 10 above their foreground counterparts
BACKGROUND_OFFSET = 10


class Ansi(Enum):
    """Basic 16-color palette; each member's value is its foreground SGR code."""

    Default = 39
    Black = 30
    Red = 31
    Green = 32
    Yellow = 33
    Blue = 34
    Magenta = 35
    Cyan = 36
    White = 37
    BrightBlack = 90
    BrightRed = 91
    BrightGreen = 92
    BrightYellow = 93
    BrightBlue = 94
    BrightMagenta = 95
    BrightCyan = 96
    BrightWhite = 97

    @classmethod
    def from_name(cls, name: str) -> Ansi:
        """Does: Case-insensitive name match (`BrightRed`, `brightred`, `BRIGHTRED`).

        Raises:
            UnknownNamedColor: no member carries that name.
        """
        key = name.strip().casefold()
        for member in cls:
            if member.name.casefold() == key:
                return member
        raise UnknownNamedColor(name)

    def foreground_code(self) -> int:
        return self.value

    def background_code(self) -> int:
        return self.value + BACKGROUND_OFFSET

    def escape_fragment(self, is_background: bool) -> List[int]:
        return [self.background_code() if is_background else self.foreground_code()]

    def to_value(self) -> str:
        return self.name

    @classmethod
    def from_value(cls, value: object) -> Ansi:
        if isinstance(value, Ansi):
            return value
        if not isinstance(value, str):
            raise GrammarMismatch(value, "an ANSI color name")
        return cls.from_name(value)

    def __str__(self) -> str:
        return self.name
