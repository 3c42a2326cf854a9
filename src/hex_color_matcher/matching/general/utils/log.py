"""
log.py.

Does: Step-by-step tracer for the matching pipeline, switched on per topic
      through HEXMATCH_DEBUG_TOPICS ("ranking,pattern" or "all").
Returns: Nothing; writes `[time] [topic][LEVEL] message` lines to stderr.
Used by: ranking pipeline, pattern detector, demo CLI (--debug).

Messages take %-style arguments and are only formatted for enabled topics,
so tracing calls can stay in hot paths.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "enabled", "active_topics", "reload_topics"]

TOPICS_ENV = "HEXMATCH_DEBUG_TOPICS"
ALL_TOPICS = "all"


def _parse_topics(raw: str) -> frozenset[str]:
    return frozenset(part.strip().lower() for part in raw.split(",") if part.strip())


_topics = _parse_topics(os.environ.get(TOPICS_ENV, ""))


def reload_topics() -> None:
    """Does: Re-read HEXMATCH_DEBUG_TOPICS (after monkeypatching the env in tests)."""
    global _topics
    _topics = _parse_topics(os.environ.get(TOPICS_ENV, ""))


def active_topics() -> frozenset[str]:
    return _topics


def enabled(topic: str) -> bool:
    """Does: True if traces for topic are switched on. Nothing is on by default."""
    return ALL_TOPICS in _topics or topic.strip().lower() in _topics


def debug(
    msg: str,
    *args: object,
    topic: str = "matching",
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Write one trace line for topic, formatting `msg % args` lazily."""
    if not enabled(topic):
        return
    text = msg % args if args else msg
    stamp = datetime.now().isoformat(sep=" ", timespec="milliseconds")
    print(
        f"[{stamp}] [{topic.strip().lower()}][{level.upper()}] {text}",
        file=stream or sys.stderr,
    )
