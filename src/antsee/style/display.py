"""
display.
=======

Does: Pair a piece of text with a `Style` so it renders when formatted.
Returns: `StyledString`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .style import Style

__all__ = ["StyledString"]
__docformat__ = "google"


@dataclass(frozen=True)
class StyledString:
    content: str
    style: Style = field(default_factory=Style)

    def fg(self, color: object) -> StyledString:
        return replace(self, style=self.style.fg(color))

    def bg(self, color: object) -> StyledString:
        return replace(self, style=self.style.bg(color))

    def with_style(self, style: Style) -> StyledString:
        return replace(self, style=style)

    def __str__(self) -> str:
        return self.style.render(self.content)
