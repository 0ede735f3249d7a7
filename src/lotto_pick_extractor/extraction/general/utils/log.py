"""
log.py.

Does: Topic-gated debug printer controlled by LOTTO_DEBUG_TOPICS (comma-sep or 'all'),
      plus a row dumper for listing candidate partitions one per line.
Returns: Timestamped lines on stderr. Used by the pick selector and the CLI.
"""

import os
import sys
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "debug_rows", "is_topic_enabled", "reload_topics"]

_ENV_VAR = "LOTTO_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(_ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Re-read LOTTO_DEBUG_TOPICS (tests flip it through monkeypatch)."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def is_topic_enabled(topic: str) -> bool:
    """An empty topic set enables everything."""
    key = topic.lower().strip()
    return not _DEBUG_TOPICS or "all" in _DEBUG_TOPICS or key in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "pick",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print `[ts] [topic][LEVEL] msg` when `topic` is enabled."""
    if not is_topic_enabled(topic):
        return
    out = stream if stream is not None else sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=out)


def debug_rows(
    title: str,
    rows: Iterable[Sequence[str]],
    topic: str = "pick",
    *,
    stream: TextIO | None = None,
) -> int:
    """
    Does: Print a header line then each row comma-joined (e.g. "10,1,12,22,41,2,29").
    Returns: Number of rows printed (0 when the topic is disabled).
    """
    if not is_topic_enabled(topic):
        return 0
    out = stream if stream is not None else sys.stderr
    materialized = [",".join(r) for r in rows]
    debug(f"{title}: {len(materialized)} row(s)", topic, stream=out)
    for line in materialized:
        print(f"    {line}", file=out)
    return len(materialized)
