# tests/test_color_libraries.py

from __future__ import annotations

import pytest

from antsee.color import libraries as lib
from antsee.color.libraries import css as css_mod

"""
palette table tests
===================

Does: Validate the CSS (webcolors-backed) and xterm tables, case-exact lookups,
      the total index lookup, the library(name) wrapper and fuzzy suggestions.
"""


# ──────────────────────────────────────────────────────────────────────────────
# CSS table
# ──────────────────────────────────────────────────────────────────────────────
def test_css_table_contains_standard_names_and_extras():
    table = lib.css_colors()
    assert len(table) >= 140
    assert table["red"].rgb == (255, 0, 0)
    assert table["rebeccapurple"].rgb == (102, 51, 153)
    assert table["red"].index is None
    assert table["red"].library == lib.CSS


def test_css_table_is_built_once_and_read_only():
    assert lib.css_colors() is lib.css_colors()
    with pytest.raises(TypeError):
        lib.css_colors()["red"] = None  # type: ignore[index]


def test_css_extras_do_not_override_webcolors():
    rgb = css_mod.load_css_rgb()
    for name, value in css_mod.CSS_EXTRA_COLORS.items():
        assert rgb[name] == value


def test_css_lookup_is_case_exact():
    assert lib.lookup_by_name("css", "red") is not None
    assert lib.lookup_by_name("css", "Red") is None


# ──────────────────────────────────────────────────────────────────────────────
# Xterm table
# ──────────────────────────────────────────────────────────────────────────────
def test_xterm_table_has_256_unique_entries():
    table = lib.xterm_colors()
    assert len(table) == 256
    assert sorted(e.index for e in table.values()) == list(range(256))


@pytest.mark.parametrize(
    "name,index,rgb",
    [
        ("Black", 0, (0, 0, 0)),
        ("Seafoam", 121, (135, 255, 175)),
        ("Red2", 160, (215, 0, 0)),
        ("DarkMauve", 95, (135, 95, 95)),
        ("Grey93", 255, (238, 238, 238)),
    ],
)
def test_xterm_lookup_by_name(name, index, rgb):
    entry = lib.lookup_by_name("xterm", name)
    assert entry is not None
    assert (entry.index, entry.rgb, entry.library) == (index, rgb, lib.XTERM)


def test_xterm_lookup_by_index_is_total():
    for i in range(256):
        entry = lib.lookup_by_index(i)
        assert entry.index == i
        assert lib.lookup_by_name("xterm", entry.name) == entry


@pytest.mark.parametrize("index", [-1, 256])
def test_xterm_lookup_by_index_out_of_range(index):
    with pytest.raises(ValueError):
        lib.lookup_by_index(index)


def test_lookup_accepts_mapping_and_rejects_unknown_library():
    assert lib.lookup_by_name(lib.xterm_colors(), "Seafoam").index == 121
    with pytest.raises(ValueError):
        lib.lookup_by_name("pantone", "red")


# ──────────────────────────────────────────────────────────────────────────────
# Wrapper syntax & suggestions
# ──────────────────────────────────────────────────────────────────────────────
def test_wrap_and_unwrap_name():
    assert lib.wrap_name("css", "red") == "css(red)"
    assert lib.unwrap_name("xterm", "xterm(Seafoam)") == "Seafoam"
    assert lib.unwrap_name("xterm", "  xterm( Seafoam ) ") == "Seafoam"
    assert lib.unwrap_name("css", "xterm(Seafoam)") is None
    assert lib.unwrap_name("css", "css(red") is None


def test_suggest_name_close_typo():
    assert lib.suggest_name("xterm", "Seafom") == "Seafoam"


def test_suggest_name_nothing_close():
    assert lib.suggest_name("xterm", "qqqqqqqqqqqq") is None
    assert lib.suggest_name("css", "") is None
