"""
stop_words.py

Does: Stop-word set providers for callers of tokenize(): the bundled JSON list
      (data/stop_words.json) and NLTK's stopwords corpus per language.
Returns: load_stop_words(), nltk_stop_words(), combine_stop_words().
Used by: the CLI and index/query callers choosing a stop-word set per field.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import lru_cache

from nltk.corpus import stopwords

from phrase_tokenizer.utils.load_config import load_config

__all__ = [
    "DEFAULT_STOP_WORDS_FILE",
    "load_stop_words",
    "nltk_stop_words",
    "combine_stop_words",
]

log = logging.getLogger(__name__)

DEFAULT_STOP_WORDS_FILE = "stop_words"


def load_stop_words(name: str = DEFAULT_STOP_WORDS_FILE) -> frozenset[str]:
    """Does: Load <data>/<name>.json as a lowercase frozenset. Returns: frozenset[str]."""
    return load_config(name, mode="set")


@lru_cache(maxsize=32)
def nltk_stop_words(language: str = "english") -> frozenset[str]:
    """
    Does: Read NLTK's stopwords corpus for `language` ("english", "spanish", ...).
    Returns: Lowercase frozenset, or an empty one when the corpus (or the
             language file) is not installed.
    """
    try:
        words = stopwords.words(language)
    except (LookupError, OSError) as e:
        log.warning("NLTK stopwords unavailable for %r: %s", language, e)
        return frozenset()
    return frozenset(w.strip().lower() for w in words if w and w.strip())


def combine_stop_words(*sets: Iterable[str] | None) -> frozenset[str]:
    """Does: Union several providers, skipping None. Returns: frozenset[str]."""
    out: set[str] = set()
    for s in sets:
        if s:
            out.update(w.lower() for w in s)
    return frozenset(out)
