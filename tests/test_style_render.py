# tests/test_style_render.py

from __future__ import annotations

import pytest

from antsee import TRUECOLOR, Ansi, Color, Style, StyledString
from antsee.escape import RESET, sgr

"""
Style rendering tests
=====================

Does: Pin the exact escape bytes a Style produces, its builders, capability
      propagation and the mapping form used by themes.
"""


# ──────────────────────────────────────────────────────────────────────────────
# escape helpers
# ──────────────────────────────────────────────────────────────────────────────
def test_sgr_joins_codes():
    assert sgr([31, 40, 1]) == "\x1b[31;40;1m"
    assert sgr([]) == "\x1b[m"
    assert RESET == "\x1b[0m"


# ──────────────────────────────────────────────────────────────────────────────
# Exact bytes
# ──────────────────────────────────────────────────────────────────────────────
def test_fg_bg_bold_underline():
    style = Style().fg(Ansi.Red).bg(Ansi.Black).bold().underline()
    assert style.render("Hello") == "\x1b[31;40;1;4mHello\x1b[0m"


def test_blank_style_still_wraps():
    assert Style().render("x") == "\x1b[mx\x1b[0m"


def test_prefix_with_reset_leads_the_sequence():
    style = Style().fg("Red").with_prefix_reset()
    assert style.codes() == [0, 31]
    assert style.render("x") == "\x1b[0;31mx\x1b[0m"


def test_256_and_rgb_fragments():
    style = Style().fg(160).bg("#a6fc35")
    assert style.render("x") == "\x1b[38;5;160;48;2;166;252;53mx\x1b[0m"


def test_attribute_order_is_fixed():
    style = Style().strikethrough().italic().bold()
    assert style.codes() == [1, 3, 9]


def test_paint_is_render():
    style = Style().fg("Green")
    assert style.paint("ok") == style.render("ok")


# ──────────────────────────────────────────────────────────────────────────────
# Builders & capability
# ──────────────────────────────────────────────────────────────────────────────
def test_multi_tier_color_follows_capability():
    color = Color().with_color("Red").with_color("#a6fc35")
    style = Style().fg(color)
    assert style.codes() == [31]
    assert style.with_capability(TRUECOLOR).codes() == [38, 2, 166, 252, 53]


def test_with_capability_leaves_unset_colors_unset():
    style = Style().bold().with_capability(TRUECOLOR)
    assert style.foreground is None and style.background is None
    assert style.codes() == [1]


def test_on_light_background_switches_both_colors():
    fg = Color.parse("White").with_light_color("Black")
    bg = Color.parse("Black").with_light_color("White")
    style = Style().fg(fg).bg(bg).on_light_background()
    assert style.codes() == [30, 47]


def test_with_attribute_toggle_and_reset():
    style = Style().fg("Red").bold().with_attribute("bold", False)
    assert style.codes() == [31]
    assert style.reset() == Style()


def _full_style(style: Style) -> Style:
    fg = Color().with_color("Red").with_color(160).with_color("#a6fc35").with_light_color("Black")
    return (
        style.fg(fg)
        .bg("xterm(Grey19)")
        .bold()
        .italic()
        .strikethrough()
        .with_prefix_reset()
        .with_capability(TRUECOLOR)
    )


@pytest.mark.parametrize("light", [None, True])
def test_reset_then_rebuild_renders_identically(light):
    built = _full_style(Style()).on_light_background(light)
    rebuilt = _full_style(built.reset()).on_light_background(light)
    assert rebuilt.render("Hello") == built.render("Hello")
    assert rebuilt == built


def test_full_style_exact_bytes():
    assert _full_style(Style()).render("Hello") == (
        "\x1b[0;38;2;166;252;53;48;5;236;1;3;9mHello\x1b[0m"
    )


def test_builders_are_non_mutating():
    base = Style()
    base.fg("Red").bold()
    assert base == Style()


# ──────────────────────────────────────────────────────────────────────────────
# StyledString
# ──────────────────────────────────────────────────────────────────────────────
def test_styled_string_renders_on_format():
    text = StyledString("hi").fg("Blue").bg("White")
    assert str(text) == "\x1b[34;47mhi\x1b[0m"
    assert f"{text}" == str(text)


def test_styled_string_with_style():
    text = StyledString("hi").with_style(Style().dim())
    assert str(text) == "\x1b[2mhi\x1b[0m"


# ──────────────────────────────────────────────────────────────────────────────
# Mapping form
# ──────────────────────────────────────────────────────────────────────────────
def test_to_value_omits_unset_parts():
    assert Style().to_value() == {}
    style = Style().fg("css(red)").bg(236).bold().with_prefix_reset()
    assert style.to_value() == {
        "fg": "css(red)",
        "bg": 236,
        "attributes": {"bold": True},
        "prefix_with_reset": True,
    }


def test_from_value_round_trip():
    payload = {
        "fg": {"ansi16": "Cyan", "rgb": "css(teal)"},
        "bg": "xterm(Grey19)",
        "attributes": {"italic": True},
    }
    assert Style.from_value(payload).to_value() == payload


@pytest.mark.parametrize(
    "payload",
    [
        {"color": "Red"},
        {"prefix_with_reset": "yes"},
        {"fg": "css(reddish)"},
        ["Red"],
    ],
)
def test_from_value_rejects_bad_payloads(payload):
    with pytest.raises(ValueError):
        Style.from_value(payload)
