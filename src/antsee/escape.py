"""
escape.
======

Does: Build ANSI SGR ("Select Graphic Rendition") escape strings from code lists.
Returns: Plain strings; nothing here writes to a terminal.
"""

from __future__ import annotations

from typing import Iterable

__all__ = ["ESC", "CSI", "RESET", "RESET_CODE", "sgr"]

ESC = "\x1b"
CSI = ESC + "["
RESET_CODE = 0
RESET = f"{CSI}{RESET_CODE}m"


def sgr(codes: Iterable[int]) -> str:
    """Does: Join codes with ';' inside `ESC[...m`. No codes gives the bare `ESC[m`."""
    return CSI + ";".join(str(c) for c in codes) + "m"
