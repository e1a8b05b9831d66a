# src/phrase_tokenizer/token/words.py

"""
words.py.

Does: Split text into words on whitespace, then split each word on secondary
      delimiters, folding a short trailing fragment into its neighbour
      ("at&t" → "at-t"), and drop stop words.
Returns: split_words() → list of LITERAL leaves.
Used by: special.parse_leaves() once no special token remains.
"""

from __future__ import annotations

import re
from collections.abc import Set as AbcSet

from phrase_tokenizer.types import LeafToken

__all__ = [
    "SECONDARY_DELIMITERS",
    "split_words",
]

# Delimiters inside a word (after whitespace splitting)
SECONDARY_DELIMITERS = "&()+,-–—.[/]:;<=>@\\_{|}~"

_WHITESPACE_RE = re.compile(r"[\t ]")
_SECONDARY_RE = re.compile("[" + re.escape(SECONDARY_DELIMITERS) + "]")

# trailing fragments this short are folded into the previous part
_MAX_FOLD_LEN = 2


def _split_word(word: str) -> list[str]:
    parts = [p for p in _SECONDARY_RE.split(word) if p]
    if len(parts) >= 2 and len(parts[-1]) <= _MAX_FOLD_LEN:
        # secondary delimiters normalize to "-"
        parts[-2] = f"{parts[-2]}-{parts[-1]}"
        parts.pop()
    return parts


def split_words(raw: str, stop_words: AbcSet[str] | None = None) -> list[LeafToken]:
    """
    Does: Whitespace split → secondary split + short-tail fold → stop-word drop.
          Stop words are removed only after the secondary split, so a
          multi-part token like "at-t" survives even if "at" is a stop word.
    Returns: LITERAL leaves in input order.
    """
    values: list[str] = []
    for word in _WHITESPACE_RE.split(raw):
        if word:
            values.extend(_split_word(word))

    if stop_words is not None:
        values = [v for v in values if v not in stop_words]

    return [LeafToken.literal(v) for v in values]
