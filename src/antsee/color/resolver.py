"""
resolver.
========

Does: Hold one logical color pre-resolved on up to three tiers (16 / 256 / RGB),
      optionally a second set for light backgrounds, and pick the best tier for
      a caller-supplied terminal capability.
Used By: `Style` rendering, themes.
Returns: `Color` (immutable, fluent builders) plus `ColorLevels` and `Capability`.

Selection order:
1. `light_levels` when `background_is_light is True` and it holds a value, else `levels`.
2. Capability unknown: optimistic → RGB, 256, 16; otherwise 16, 256, RGB.
   The first populated tier wins.
3. Capability known: RGB if truecolor, then 256 if ansi256, then the 16-color
   tier. The 16-color tier is used even when `ansi16` is False.
4. Nothing populated: `Ansi.Default`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, NamedTuple, Optional

from ..utils.log import debug
from .ansi import Ansi
from .errors import GrammarMismatch
from .fixed import Fixed
from .rgb import Rgb
from .value import ColorValue, Tier, parse_color_value, tier_of

__all__ = [
    "Capability",
    "BASIC",
    "EXTENDED",
    "TRUECOLOR",
    "ColorLevels",
    "ChainLink",
    "Color",
]
__docformat__ = "google"

LIGHT_KEY = "light"


class Capability(NamedTuple):
    """Which tiers the target terminal is believed to support."""

    ansi16: bool = True
    ansi256: bool = False
    truecolor: bool = False


BASIC = Capability(ansi16=True, ansi256=False, truecolor=False)
EXTENDED = Capability(ansi16=True, ansi256=True, truecolor=False)
TRUECOLOR = Capability(ansi16=True, ansi256=True, truecolor=True)


# ─────────────────────────────────────────────────────────────────────────────
# Tier slots
# ─────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ColorLevels:
    """One slot per tier; a populated slot always holds that tier's variant."""

    ansi16: Optional[Ansi] = None
    ansi256: Optional[Fixed] = None
    rgb: Optional[Rgb] = None

    def with_value(self, value: ColorValue) -> ColorLevels:
        """Does: Route `value` into the slot matching its variant."""
        if isinstance(value, Ansi):
            return replace(self, ansi16=value)
        if isinstance(value, Fixed):
            return replace(self, ansi256=value)
        if isinstance(value, Rgb):
            return replace(self, rgb=value)
        raise TypeError(f"not a color value: {value!r}")

    def get(self, tier: Tier) -> Optional[ColorValue]:
        return getattr(self, tier.value)

    def populated(self) -> List[ColorValue]:
        """Does: Return populated slots in tier order 16, 256, RGB."""
        return [v for v in (self.ansi16, self.ansi256, self.rgb) if v is not None]

    def is_empty(self) -> bool:
        return not self.populated()

    def to_value(self) -> Dict[str, Any]:
        return {tier_of(v).value: v.to_value() for v in self.populated()}

    @classmethod
    def from_value(cls, value: Mapping[str, Any]) -> ColorLevels:
        """Does: Build levels from `{"ansi16": ..., "ansi256": ..., "rgb": ...}` (all optional)."""
        parsers: Dict[str, Callable[[Any], ColorValue]] = {
            Tier.ANSI16.value: Ansi.from_value,
            Tier.ANSI256.value: Fixed.from_value,
            Tier.RGB.value: Rgb.from_value,
        }
        levels = cls()
        for key, raw in value.items():
            parser = parsers.get(key)
            if parser is None:
                raise GrammarMismatch(key, f"one of {sorted(parsers)}")
            levels = levels.with_value(parser(raw))
        return levels


class ChainLink(NamedTuple):
    """One step of the fallback chain: take `accessor()` when `predicate()` holds."""

    label: str
    predicate: Callable[[], bool]
    accessor: Callable[[], ColorValue]


# ─────────────────────────────────────────────────────────────────────────────
# Color
# ─────────────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class Color:
    levels: ColorLevels = field(default_factory=ColorLevels)
    light_levels: Optional[ColorLevels] = None
    capability: Optional[Capability] = None
    optimistic: bool = False
    background_is_light: Optional[bool] = None

    # ── Constructors ─────────────────────────────────────────────────────────
    @classmethod
    def from_color_value(cls, value: ColorValue) -> Color:
        return cls(levels=ColorLevels().with_value(value))

    @classmethod
    def parse(cls, payload: object) -> Color:
        """Does: Build a one-tier color from any grammar payload ("css(red)", 160, ...)."""
        return cls.from_color_value(parse_color_value(payload))

    # ── Builders ─────────────────────────────────────────────────────────────
    def with_color(self, value: object) -> Color:
        return replace(self, levels=self.levels.with_value(parse_color_value(value)))

    def with_light_color(self, value: object) -> Color:
        light = self.light_levels or ColorLevels()
        return replace(self, light_levels=light.with_value(parse_color_value(value)))

    def with_capability(self, capability: Optional[Capability]) -> Color:
        return replace(self, capability=capability)

    def with_optimism(self, optimistic: bool = True) -> Color:
        return replace(self, optimistic=optimistic)

    def on_light_background(self, is_light: Optional[bool] = True) -> Color:
        return replace(self, background_is_light=is_light)

    def reset(self) -> Color:
        return Color()

    # ── Resolution ───────────────────────────────────────────────────────────
    def active_levels(self) -> ColorLevels:
        light = self.light_levels
        if self.background_is_light is True and light is not None and not light.is_empty():
            return light
        return self.levels

    def resolution_chain(self) -> List[ChainLink]:
        """Does: Return the ordered (predicate, accessor) links `select` walks top to bottom."""
        levels = self.active_levels()
        cap = self.capability
        chain: List[ChainLink] = []

        if cap is None:
            if self.optimistic:
                order = (Tier.RGB, Tier.ANSI256, Tier.ANSI16)
            else:
                order = (Tier.ANSI16, Tier.ANSI256, Tier.RGB)
            for tier in order:
                chain.append(
                    ChainLink(
                        tier.value,
                        lambda t=tier: levels.get(t) is not None,
                        lambda t=tier: levels.get(t),
                    )
                )
        else:
            chain.append(
                ChainLink("rgb", lambda: cap.truecolor and levels.rgb is not None, lambda: levels.rgb)
            )
            chain.append(
                ChainLink(
                    "ansi256",
                    lambda: cap.ansi256 and levels.ansi256 is not None,
                    lambda: levels.ansi256,
                )
            )
            # cap.ansi16 is deliberately not consulted
            chain.append(
                ChainLink("ansi16", lambda: levels.ansi16 is not None, lambda: levels.ansi16)
            )

        chain.append(ChainLink("default", lambda: True, lambda: Ansi.Default))
        return chain

    def select(self) -> ColorValue:
        """Does: Return the single concrete value this color renders as."""
        for link in self.resolution_chain():
            if link.predicate():
                value = link.accessor()
                debug(
                    f"selected {link.label} -> {value!r} "
                    f"(capability={self.capability}, optimistic={self.optimistic})",
                    topic="resolve",
                )
                return value
        return Ansi.Default

    def resolve(self, is_background: bool) -> List[int]:
        """Does: Return the SGR code fragment for the selected tier. Never raises."""
        return self.select().escape_fragment(is_background)

    # ── Serialization ────────────────────────────────────────────────────────
    def to_value(self) -> Any:
        """Does: One tier and no light set → that value's form (when it reads back on the
        same tier); otherwise a tier mapping.
        """
        light = self.light_levels
        has_light = light is not None and not light.is_empty()
        populated = self.levels.populated()
        if not has_light and len(populated) == 1:
            value = populated[0]
            compact = value.to_value()
            # Rgb from xterm(...) reads back as Fixed; keep the tier key then
            if tier_of(parse_color_value(compact)) is tier_of(value):
                return compact
        data = self.levels.to_value()
        if has_light:
            data[LIGHT_KEY] = light.to_value()  # type: ignore[union-attr]
        return data

    @classmethod
    def from_value(cls, value: object) -> Color:
        """Does: Accept a single grammar payload or a tier mapping (with optional "light")."""
        if isinstance(value, Color):
            return value
        if isinstance(value, Mapping):
            data = dict(value)
            light_raw = data.pop(LIGHT_KEY, None)
            if light_raw is not None and not isinstance(light_raw, Mapping):
                raise GrammarMismatch(light_raw, "a mapping of tiers for 'light'")
            light = ColorLevels.from_value(light_raw) if light_raw is not None else None
            return cls(levels=ColorLevels.from_value(data), light_levels=light)
        return cls.parse(value)
