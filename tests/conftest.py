# tests/conftest.py
from __future__ import annotations

import sys
from pathlib import Path

import pytest


# ---------- Add src/ to sys.path for src-layout projects ----------
def _ensure_src_on_path() -> None:
    src = Path(__file__).resolve().parents[1] / "src"
    if src.is_dir() and str(src) not in sys.path:
        sys.path.insert(0, str(src))


_ensure_src_on_path()


# Default stop words (mirrors src/phrase_tokenizer/data/stop_words.json)
STOP_WORDS = frozenset(
    {
        "a", "about", "am", "an", "and", "are", "as", "at",
        "be", "by",
        "con",
        "de", "del", "do",
        "el", "en",
        "for", "from",
        "how",
        "i", "if", "in", "is", "it",
        "la", "las", "los",
        "me", "my",
        "new", "no",
        "of", "on", "only", "or",
        "per",
        "so",
        "that", "the", "this", "through", "thru", "to",
        "us",
        "was", "way", "we", "what", "when", "where", "who", "will", "with",
    }
)


@pytest.fixture
def stop_words() -> frozenset[str]:
    return STOP_WORDS
