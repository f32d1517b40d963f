# tests/test_color_resolver.py

from __future__ import annotations

import pytest

from antsee.color import (
    BASIC,
    EXTENDED,
    TRUECOLOR,
    Ansi,
    Capability,
    Color,
    ColorLevels,
    Fixed,
    GrammarMismatch,
    Rgb,
    Tier,
)

"""
Color resolver tests
====================

Does: Cover tier routing, the capability/optimism fallback chain, light-background
      selection, fluent builders and the compact/mapping serialization forms.
"""


@pytest.fixture
def full():
    """All three tiers populated."""
    return Color().with_color("Red").with_color("xterm(Red2)").with_color("#a6fc35")


# ──────────────────────────────────────────────────────────────────────────────
# ColorLevels
# ──────────────────────────────────────────────────────────────────────────────
def test_levels_route_by_variant():
    levels = ColorLevels().with_value(Ansi.Red).with_value(Fixed(160)).with_value(Rgb((1, 2, 3)))
    assert levels.get(Tier.ANSI16) is Ansi.Red
    assert levels.get(Tier.ANSI256) == Fixed(160)
    assert levels.get(Tier.RGB) == Rgb((1, 2, 3))
    assert levels.populated() == [Ansi.Red, Fixed(160), Rgb((1, 2, 3))]


def test_levels_with_value_replaces_same_tier():
    levels = ColorLevels().with_value(Ansi.Red).with_value(Ansi.Blue)
    assert levels.ansi16 is Ansi.Blue
    assert levels.populated() == [Ansi.Blue]


def test_levels_reject_non_color():
    with pytest.raises(TypeError):
        ColorLevels().with_value("red")  # type: ignore[arg-type]


def test_levels_from_value_unknown_key():
    with pytest.raises(GrammarMismatch):
        ColorLevels.from_value({"ansi512": 3})


def test_levels_from_value_checks_tier_shape():
    # a palette index is not a valid 16-color entry
    with pytest.raises(GrammarMismatch):
        ColorLevels.from_value({"ansi16": 3})


# ──────────────────────────────────────────────────────────────────────────────
# Capability unknown
# ──────────────────────────────────────────────────────────────────────────────
def test_unknown_capability_pessimistic_prefers_16(full):
    assert full.select() is Ansi.Red
    assert full.resolve(is_background=False) == [31]


def test_unknown_capability_optimistic_prefers_rgb(full):
    assert full.with_optimism().resolve(is_background=False) == [38, 2, 166, 252, 53]


def test_unknown_capability_walks_to_next_populated_tier():
    color = Color().with_color("xterm(Red2)").with_color("#a6fc35")
    assert color.select() == Fixed(160)
    assert color.with_optimism().select() == Rgb((166, 252, 53))
    assert Color.parse("#a6fc35").select() == Rgb((166, 252, 53))


# ──────────────────────────────────────────────────────────────────────────────
# Capability known
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "capability,expected",
    [
        (TRUECOLOR, [38, 2, 166, 252, 53]),
        (EXTENDED, [38, 5, 160]),
        (BASIC, [31]),
    ],
)
def test_known_capability_picks_best_supported(full, capability, expected):
    assert full.with_capability(capability).resolve(is_background=False) == expected


def test_known_capability_degrades_rgb_only_to_default():
    color = Color.parse("#a6fc35").with_capability(BASIC)
    assert color.select() is Ansi.Default
    assert color.resolve(is_background=False) == [39]
    assert color.resolve(is_background=True) == [49]


def test_known_capability_skips_missing_tiers():
    color = Color.parse("Red").with_capability(TRUECOLOR)
    assert color.resolve(is_background=True) == [41]


def test_sixteen_color_tier_is_used_even_when_not_advertised():
    cap = Capability(ansi16=False, ansi256=False, truecolor=False)
    assert Color.parse("Green").with_capability(cap).select() is Ansi.Green


def test_optimism_is_ignored_once_capability_is_known(full):
    assert full.with_optimism().with_capability(BASIC).select() is Ansi.Red


def test_empty_color_resolves_to_default():
    assert Color().select() is Ansi.Default
    assert Color().with_optimism().resolve(is_background=False) == [39]
    assert Color().with_capability(TRUECOLOR).resolve(is_background=True) == [49]


def test_resolution_chain_labels():
    assert [l.label for l in Color().resolution_chain()] == ["ansi16", "ansi256", "rgb", "default"]
    assert [l.label for l in Color().with_optimism().resolution_chain()] == [
        "rgb",
        "ansi256",
        "ansi16",
        "default",
    ]
    assert [l.label for l in Color().with_capability(BASIC).resolution_chain()] == [
        "rgb",
        "ansi256",
        "ansi16",
        "default",
    ]


# ──────────────────────────────────────────────────────────────────────────────
# Light background
# ──────────────────────────────────────────────────────────────────────────────
def test_light_levels_used_only_on_light_background():
    color = Color.parse("White").with_light_color("Black")
    assert color.select() is Ansi.White
    assert color.on_light_background(False).select() is Ansi.White
    assert color.on_light_background(None).select() is Ansi.White
    assert color.on_light_background().select() is Ansi.Black


def test_light_background_without_light_levels_falls_back():
    assert Color.parse("White").on_light_background().select() is Ansi.White


def test_light_levels_use_the_same_chain():
    color = (
        Color.parse("White")
        .with_light_color("Black")
        .with_light_color("#021e5b")
        .on_light_background()
    )
    assert color.with_capability(TRUECOLOR).resolve(is_background=False) == [38, 2, 2, 30, 91]
    assert color.select() is Ansi.Black


# ──────────────────────────────────────────────────────────────────────────────
# Builders
# ──────────────────────────────────────────────────────────────────────────────
def test_builders_do_not_mutate():
    base = Color.parse("Red")
    base.with_color("#a6fc35").with_capability(TRUECOLOR)
    assert base.levels.rgb is None
    assert base.capability is None


def test_reset_is_idempotent(full):
    assert full.with_capability(TRUECOLOR).reset() == Color()
    assert Color().reset().reset() == Color()


def _build(color: Color) -> Color:
    return (
        color.with_color("Red")
        .with_color("xterm(Red2)")
        .with_color("#a6fc35")
        .with_light_color("Black")
        .with_light_color("css(navy)")
        .with_capability(TRUECOLOR)
        .on_light_background()
    )


@pytest.mark.parametrize("is_background", [False, True])
def test_reset_then_rebuild_resolves_identically(is_background):
    built = _build(Color())
    rebuilt = _build(built.reset())
    assert rebuilt == built
    assert rebuilt.resolve(is_background) == built.resolve(is_background)
    assert rebuilt.resolve(is_background)[:2] == [48 if is_background else 38, 2]


# ──────────────────────────────────────────────────────────────────────────────
# Serialization
# ──────────────────────────────────────────────────────────────────────────────
def test_single_tier_serializes_compactly():
    assert Color.parse("css(red)").to_value() == "css(red)"
    assert Color.parse(160).to_value() == 160


def test_multi_tier_serializes_as_mapping(full):
    assert full.to_value() == {"ansi16": "Red", "ansi256": "xterm(Red2)", "rgb": "#a6fc35"}


def test_light_set_serializes_under_light_key():
    color = Color.parse("White").with_light_color("Black")
    assert color.to_value() == {"ansi16": "White", "light": {"ansi16": "Black"}}


def test_empty_color_serializes_to_empty_mapping():
    assert Color().to_value() == {}
    assert Color.from_value({}) == Color()


@pytest.mark.parametrize(
    "payload",
    [
        "css(red)",
        "xterm(Seafoam)",
        [1, 2, 3],
        {"ansi16": "Red", "ansi256": "xterm(Red2)", "rgb": "#a6fc35"},
        {"ansi16": "White", "light": {"ansi16": "Black", "rgb": "css(navy)"}},
    ],
)
def test_round_trip(payload):
    assert Color.from_value(payload).to_value() == payload


def test_rgb_from_xterm_name_keeps_its_tier():
    color = Color.from_color_value(Rgb.from_xterm_name("Seafoam"))
    assert color.to_value() == {"rgb": "xterm(Seafoam)"}

    restored = Color.from_value(color.to_value()).with_capability(TRUECOLOR)
    assert restored.levels.rgb == Rgb((135, 255, 175))
    assert restored.levels.ansi256 is None
    assert restored.resolve(is_background=False) == [38, 2, 135, 255, 175]


def test_fixed_from_xterm_name_stays_compact():
    assert Color.parse("xterm(Seafoam)").to_value() == "xterm(Seafoam)"


def test_from_value_rejects_non_mapping_light():
    with pytest.raises(GrammarMismatch):
        Color.from_value({"ansi16": "White", "light": "Black"})
