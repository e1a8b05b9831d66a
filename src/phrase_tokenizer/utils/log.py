"""
log.py.

Does: Topic-gated debug printer controlled by PHRASE_TOKENIZER_DEBUG_TOPICS
      (comma-separated topics, or 'all'; unset means silent).
Returns: debug() prints timestamped "[ts] [topic][LEVEL] msg" lines to stderr.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["ENV_VAR", "debug", "enabled", "reload_topics"]

ENV_VAR = "PHRASE_TOKENIZER_DEBUG_TOPICS"


def _load_topics() -> frozenset[str]:
    raw = os.getenv(ENV_VAR, "")
    return frozenset(t.strip().lower() for t in raw.split(",") if t.strip())


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Re-read topics from PHRASE_TOKENIZER_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enabled(topic: str) -> bool:
    """Does: True when `topic` (or 'all') is switched on."""
    if not _DEBUG_TOPICS:
        return False
    return "all" in _DEBUG_TOPICS or topic.lower().strip() in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "tokenize",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    if not enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
