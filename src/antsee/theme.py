"""
theme.
=====

Does: Load and dump named style sets ("themes") from JSON config files, keeping
      every color in the form it was written in (`css(red)` stays `css(red)`).
Used By: Applications that let users configure output styling.
Returns: `dict[str, Style]` on load; plain JSON-ready dicts on dump.

Example file (<data>/default.json):
    {
      "error":   {"fg": "BrightRed", "attributes": {"bold": true}},
      "heading": {"fg": {"ansi16": "Cyan", "rgb": "css(teal)"}, "bg": 236},
      "quote":   {"fg": "#a6fc35"}
    }
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict

from .style import Style
from .utils.load_config import ConfigParseError, load_config
from .utils.log import debug

__all__ = ["Theme", "ThemeError", "theme_from_value", "theme_to_value", "load_theme", "dump_theme"]
__docformat__ = "google"

log = logging.getLogger(__name__)

Theme = Dict[str, Style]


class ThemeError(ConfigParseError):
    """Raise when a theme entry cannot be turned into a `Style`."""

    def __init__(self, key: str, reason: str):
        self.key = key
        super().__init__(f"theme entry {key!r}: {reason}")


def theme_from_value(value: Mapping[str, Any]) -> Theme:
    """Does: Build `{name: Style}` from a parsed mapping; the first bad entry raises ThemeError."""
    if not isinstance(value, Mapping):
        raise ThemeError("<root>", f"expected a mapping, got {type(value).__name__}")
    theme: Theme = {}
    for key, raw in value.items():
        try:
            theme[str(key)] = Style.from_value(raw)
        except ValueError as e:
            raise ThemeError(str(key), str(e)) from e
    debug(f"theme built with {len(theme)} styles", topic="theme")
    return theme


def theme_to_value(theme: Mapping[str, Style]) -> Dict[str, Any]:
    return {name: style.to_value() for name, style in theme.items()}


def load_theme(file: str | os.PathLike[str], base_dir: Path | None = None) -> Theme:
    """Does: Read <data>/<file>.json and return its styles (see `load_config` for lookup rules).

    The parsed JSON comes from the mtime-keyed config cache, so reloading an
    unchanged file only rebuilds the `Style` values.
    """
    theme = theme_from_value(load_config(file, "raw", base_dir=base_dir))
    log.debug("Loaded theme %s (%d styles)", os.fspath(file), len(theme))
    return theme


def dump_theme(theme: Mapping[str, Style], path: str | os.PathLike[str]) -> Path:
    """Does: Write the theme as indented JSON; returns the written path."""
    target = Path(path)
    with target.open("w", encoding="utf-8") as f:
        json.dump(theme_to_value(theme), f, indent=2)
        f.write("\n")
    log.debug("Wrote theme to %s", target)
    return target
