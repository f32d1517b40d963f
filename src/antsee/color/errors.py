"""
errors.
======

Does: Define the parse-time exception hierarchy for color values.
Returns: Exception classes only. Resolving and rendering never raise these;
         only the parse/deserialize entry points do.
"""

from __future__ import annotations

__all__ = [
    "ColorParseError",
    "GrammarMismatch",
    "UnknownPaletteName",
    "HexWrongLength",
    "InvalidHexDigit",
    "UnknownNamedColor",
]
__docformat__ = "google"


class ColorParseError(ValueError):
    """Base class: raise when a color payload cannot be turned into a color value."""


class GrammarMismatch(ColorParseError):
    """Raise when the input matches none of the recognised shapes."""

    def __init__(self, value: object, expected: str = "a color value"):
        self.value = value
        super().__init__(f"{value!r} is not {expected}")


class UnknownPaletteName(ColorParseError):
    """Raise when `css(...)`/`xterm(...)` matched but the name is not in that table."""

    def __init__(self, library: str, name: str, suggestion: str | None = None):
        self.library = library
        self.name = name
        self.suggestion = suggestion
        msg = f"{name!r} is not a known {library} color name"
        if suggestion:
            msg += f" (did you mean {suggestion!r}?)"
        super().__init__(msg)


class HexWrongLength(ColorParseError):
    """Raise when a hex literal is not exactly 6 digits once `#` is stripped."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"{value!r}: hex colors need exactly 6 digits")


class InvalidHexDigit(ColorParseError):
    """Raise when a 6-digit hex literal contains a character outside 0-9a-f."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"{value!r} contains a non-hexadecimal digit")


class UnknownNamedColor(ColorParseError):
    """Raise when a 16-color name is not recognised."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name!r} is not an ANSI color name")
