"""
style.
=====

Does: Combine a foreground `Color`, a background `Color` and `Attributes` into one
      SGR prefix and wrap text with it.
Used By: `StyledString`, themes, library users.
Returns: `Style`, an immutable value with fluent builders.

Rendering order inside the single `ESC[...m` prefix:
    [0 if prefix_with_reset] + foreground + background + attribute codes
followed by the content and an unconditional `ESC[0m`. An unset color emits
nothing, so a blank style renders as `ESC[m<content>ESC[0m`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Union

from ..color import Capability, Color
from ..escape import RESET, RESET_CODE, sgr
from .attributes import Attribute, Attributes

__all__ = ["Style"]
__docformat__ = "google"

log = logging.getLogger(__name__)

_KEYS = ("fg", "bg", "attributes", "prefix_with_reset")


def _coerce_color(value: object) -> Optional[Color]:
    if value is None or isinstance(value, Color):
        return value
    return Color.from_value(value)


@dataclass(frozen=True)
class Style:
    foreground: Optional[Color] = None
    background: Optional[Color] = None
    attributes: Attributes = field(default_factory=Attributes)
    prefix_with_reset: bool = False

    # ── Builders ─────────────────────────────────────────────────────────────
    def fg(self, color: object) -> Style:
        """Does: Set the foreground from a `Color`, a concrete value or a grammar payload."""
        return replace(self, foreground=_coerce_color(color))

    def bg(self, color: object) -> Style:
        return replace(self, background=_coerce_color(color))

    def with_attributes(self, attributes: Attributes) -> Style:
        return replace(self, attributes=attributes)

    def with_attribute(self, attribute: Union[str, Attribute], value: bool = True) -> Style:
        return replace(self, attributes=self.attributes.set(attribute, value))

    def bold(self) -> Style:
        return self.with_attribute(Attribute.BOLD)

    def dim(self) -> Style:
        return self.with_attribute(Attribute.DIM)

    def italic(self) -> Style:
        return self.with_attribute(Attribute.ITALIC)

    def underline(self) -> Style:
        return self.with_attribute(Attribute.UNDERLINE)

    def blink(self) -> Style:
        return self.with_attribute(Attribute.BLINK)

    def reverse(self) -> Style:
        return self.with_attribute(Attribute.REVERSE)

    def hidden(self) -> Style:
        return self.with_attribute(Attribute.HIDDEN)

    def strikethrough(self) -> Style:
        return self.with_attribute(Attribute.STRIKETHROUGH)

    def with_prefix_reset(self, enabled: bool = True) -> Style:
        return replace(self, prefix_with_reset=enabled)

    def with_capability(self, capability: Optional[Capability]) -> Style:
        """Does: Apply one terminal capability to both colors (unset colors stay unset)."""
        return replace(
            self,
            foreground=self.foreground.with_capability(capability) if self.foreground else None,
            background=self.background.with_capability(capability) if self.background else None,
        )

    def on_light_background(self, is_light: Optional[bool] = True) -> Style:
        return replace(
            self,
            foreground=self.foreground.on_light_background(is_light) if self.foreground else None,
            background=self.background.on_light_background(is_light) if self.background else None,
        )

    def reset(self) -> Style:
        return Style()

    # ── Rendering ────────────────────────────────────────────────────────────
    def codes(self) -> List[int]:
        codes: List[int] = [RESET_CODE] if self.prefix_with_reset else []
        if self.foreground is not None:
            codes.extend(self.foreground.resolve(is_background=False))
        if self.background is not None:
            codes.extend(self.background.resolve(is_background=True))
        codes.extend(self.attributes.codes())
        return codes

    def prefix(self) -> str:
        return sgr(self.codes())

    def render(self, content: str) -> str:
        return f"{self.prefix()}{content}{RESET}"

    paint = render

    # ── Serialization ────────────────────────────────────────────────────────
    def to_value(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.foreground is not None:
            data["fg"] = self.foreground.to_value()
        if self.background is not None:
            data["bg"] = self.background.to_value()
        if not self.attributes.is_plain():
            data["attributes"] = self.attributes.to_value()
        if self.prefix_with_reset:
            data["prefix_with_reset"] = True
        return data

    @classmethod
    def from_value(cls, value: object) -> Style:
        """Does: Build a style from `{"fg": ..., "bg": ..., "attributes": ..., "prefix_with_reset": ...}`."""
        if isinstance(value, Style):
            return value
        if not isinstance(value, Mapping):
            raise ValueError(f"Expected a style mapping, got {type(value).__name__}")
        unknown = sorted(set(value) - set(_KEYS))
        if unknown:
            raise ValueError(f"Unknown style key(s): {', '.join(map(str, unknown))}")
        prefix_with_reset = value.get("prefix_with_reset", False)
        if not isinstance(prefix_with_reset, bool):
            raise ValueError("prefix_with_reset must be a boolean")
        style = cls(
            foreground=_coerce_color(value.get("fg")),
            background=_coerce_color(value.get("bg")),
            attributes=Attributes.from_value(value.get("attributes", {})),
            prefix_with_reset=prefix_with_reset,
        )
        log.debug("Built style %r", style)
        return style
