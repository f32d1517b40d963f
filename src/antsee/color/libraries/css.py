"""
css
===

Does: Build the CSS named-color table (name → RGB) from webcolors' CSS3 list
      plus the project extras that list predates.
Used By: `antsee.color.libraries` lookups and `Rgb.from_css_name`.
Returns: A plain {name: (r, g, b)} dict, built on demand.
"""

from __future__ import annotations

import logging

import webcolors

log = logging.getLogger(__name__)

# ── Project extras (CSS Color Level 4 names absent from the CSS3 list) ──────
CSS_EXTRA_COLORS: dict[str, tuple[int, int, int]] = {
    "rebeccapurple": (102, 51, 153),
}


def load_css_rgb() -> dict[str, tuple[int, int, int]]:
    """Does: Return every CSS color name (lowercase) with its integer RGB triplet."""
    table: dict[str, tuple[int, int, int]] = {}
    for name in webcolors.names(webcolors.CSS3):
        table[name] = tuple(webcolors.name_to_rgb(name, spec=webcolors.CSS3))
    for name, rgb in CSS_EXTRA_COLORS.items():
        table.setdefault(name, rgb)
    log.debug("Loaded %d CSS color names", len(table))
    return table
