"""
attributes.
==========

Does: Model the eight boolean text attributes (bold, dim, ...) and their SGR codes.
Returns: `Attribute` (code enum, fixed emission order) and `Attributes` (immutable flag set).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields, replace
from enum import IntEnum
from typing import Dict, List, Union

__all__ = ["Attribute", "Attributes"]
__docformat__ = "google"


class Attribute(IntEnum):
    """SGR code per attribute; definition order is the emission order."""

    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    REVERSE = 7
    HIDDEN = 8
    STRIKETHROUGH = 9

    @property
    def field_name(self) -> str:
        return self.name.lower()

    @classmethod
    def from_name(cls, name: Union[str, Attribute]) -> Attribute:
        if isinstance(name, Attribute):
            return name
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown text attribute {name!r}") from None


@dataclass(frozen=True)
class Attributes:
    bold: bool = False
    dim: bool = False
    italic: bool = False
    underline: bool = False
    blink: bool = False
    reverse: bool = False
    hidden: bool = False
    strikethrough: bool = False

    @classmethod
    def of(cls, *attributes: Union[str, Attribute]) -> Attributes:
        return cls().enable(*attributes)

    def set(self, attribute: Union[str, Attribute], value: bool = True) -> Attributes:
        return replace(self, **{Attribute.from_name(attribute).field_name: bool(value)})

    def enable(self, *attributes: Union[str, Attribute]) -> Attributes:
        return replace(self, **{Attribute.from_name(a).field_name: True for a in attributes})

    def disable(self, *attributes: Union[str, Attribute]) -> Attributes:
        return replace(self, **{Attribute.from_name(a).field_name: False for a in attributes})

    def reset(self) -> Attributes:
        return Attributes()

    def enabled(self) -> List[Attribute]:
        return [a for a in Attribute if getattr(self, a.field_name)]

    def is_plain(self) -> bool:
        return not self.enabled()

    def codes(self) -> List[int]:
        """Does: One SGR code per enabled attribute, in `Attribute` order."""
        return [int(a) for a in self.enabled()]

    # ── Serialization ────────────────────────────────────────────────────────
    def to_value(self) -> Dict[str, bool]:
        """Does: Mapping of the enabled flags only (missing keys read back as False)."""
        return {a.field_name: True for a in self.enabled()}

    @classmethod
    def from_value(cls, value: object) -> Attributes:
        """Does: Accept `{"bold": true, ...}` or a list of attribute names."""
        if isinstance(value, Attributes):
            return value
        if isinstance(value, Mapping):
            known = {f.name for f in fields(cls)}
            unknown = sorted(set(value) - known)
            if unknown:
                raise ValueError(f"Unknown text attribute(s): {', '.join(map(str, unknown))}")
            bad = [k for k, v in value.items() if not isinstance(v, bool)]
            if bad:
                raise ValueError(f"Text attributes must be booleans: {', '.join(bad)}")
            return cls(**value)
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            return cls.of(*value)
        raise ValueError(f"Expected a mapping or list of text attributes, got {value!r}")
