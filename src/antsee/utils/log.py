"""
log.py.

Does: Lightweight trace logger controlled by ANTSEE_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Used by the resolver, themes and tests.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "is_enabled"]

ENV_VAR = "ANTSEE_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable ANTSEE_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def is_enabled(topic: str) -> bool:
    """Does: Tell whether trace lines for `topic` are currently printed."""
    topic_key = topic.lower().strip()
    return bool(_DEBUG_TOPICS) and ("all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS)


def debug(
    msg: str,
    topic: str = "antsee",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped trace line with topic and level
    if enabled via ANTSEE_DEBUG_TOPICS. Silent when the variable is empty.
    """
    if not is_enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
