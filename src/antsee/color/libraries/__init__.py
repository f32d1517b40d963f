"""
libraries.
=========

Does: Expose the two named-color tables (CSS: name → RGB; xterm: name ↔ index ↔ RGB)
      as read-only mappings of `PaletteEntry`, plus the `library(name)` wrapper
      helpers and a fuzzy "did you mean" lookup for error messages.
Used By: Fixed/Rgb parsing and serialization, themes.
Returns: Frozen entries and mapping proxies; tables are built once and never mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Optional, Tuple, Union

from rapidfuzz import fuzz, process

from .css import load_css_rgb
from .xterm import XTERM_PALETTE

__all__ = [
    "CSS",
    "XTERM",
    "LIBRARIES",
    "PaletteEntry",
    "css_colors",
    "xterm_colors",
    "lookup_by_name",
    "lookup_by_index",
    "wrap_name",
    "unwrap_name",
    "suggest_name",
]
__docformat__ = "google"

log = logging.getLogger(__name__)

CSS = "css"
XTERM = "xterm"
LIBRARIES = (CSS, XTERM)

# Minimum rapidfuzz WRatio for a suggestion to be offered
SUGGESTION_CUTOFF = 80


@dataclass(frozen=True)
class PaletteEntry:
    """One named color: CSS entries have no palette index."""

    name: str
    index: Optional[int]
    rgb: Tuple[int, int, int]
    library: str


# ── Tables (lazy, built once) ────────────────────────────────────────────────
@lru_cache(maxsize=1)
def css_colors() -> Mapping[str, PaletteEntry]:
    """Does: Return the CSS table keyed by lowercase name."""
    entries = {
        name: PaletteEntry(name=name, index=None, rgb=rgb, library=CSS)
        for name, rgb in load_css_rgb().items()
    }
    return MappingProxyType(entries)


@lru_cache(maxsize=1)
def _xterm_entries() -> Tuple[PaletteEntry, ...]:
    return tuple(
        PaletteEntry(name=name, index=i, rgb=(r, g, b), library=XTERM)
        for i, (name, r, g, b) in enumerate(XTERM_PALETTE)
    )


@lru_cache(maxsize=1)
def xterm_colors() -> Mapping[str, PaletteEntry]:
    """Does: Return the xterm table keyed by PascalCase name."""
    return MappingProxyType({e.name: e for e in _xterm_entries()})


def _table(table: Union[str, Mapping[str, PaletteEntry]]) -> Mapping[str, PaletteEntry]:
    if isinstance(table, str):
        if table == CSS:
            return css_colors()
        if table == XTERM:
            return xterm_colors()
        raise ValueError(f"Unknown color library {table!r} (expected one of {LIBRARIES})")
    return table


# ── Lookups ──────────────────────────────────────────────────────────────────
def lookup_by_name(
    table: Union[str, Mapping[str, PaletteEntry]], name: str
) -> Optional[PaletteEntry]:
    """Does: Case-exact lookup of `name` in the given table ("css", "xterm" or a mapping)."""
    return _table(table).get(name)


def lookup_by_index(index: int) -> PaletteEntry:
    """Does: Return the xterm entry for a palette index. Total over 0-255."""
    if not 0 <= index <= 255:
        raise ValueError(f"xterm palette index out of range: {index}")
    return _xterm_entries()[index]


# ── Wrapper syntax: css(name) / xterm(name) ──────────────────────────────────
def wrap_name(library: str, name: str) -> str:
    """Does: Wrap a table name in its library's function-style wrapper."""
    return f"{library}({name})"


def unwrap_name(library: str, text: str) -> Optional[str]:
    """Does: Extract the name from `library(name)`; None when `text` has another shape."""
    text = text.strip()
    prefix = f"{library}("
    if text.startswith(prefix) and text.endswith(")"):
        return text[len(prefix):-1].strip()
    return None


def suggest_name(library: str, name: str) -> Optional[str]:
    """Does: Return the closest table name to `name`, or None when nothing is close."""
    if not name:
        return None
    hit = process.extractOne(
        name, list(_table(library).keys()), scorer=fuzz.WRatio, score_cutoff=SUGGESTION_CUTOFF
    )
    if hit is None:
        return None
    log.debug("Suggestion for %s(%s): %s (score=%.1f)", library, name, hit[0], hit[1])
    return hit[0]
