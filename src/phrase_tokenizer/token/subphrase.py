# src/phrase_tokenizer/token/subphrase.py

"""
subphrase.py.

Does: Split a Raw leaf at strong delimiters (" & ", ", ", "- ", ...) marking
      that the text on either side is unrelated, and parse each side into
      its own SubPhrase branch.
Returns: split_sub_phrases() → leaves (one sub-phrase) or SubPhrase branches.
Used by: tokenizer.parse_tree() for every Raw leaf of the parenthetical graph.

Notes:
- Contrast "nfl ti-rev" (ti relates to rev) with "nfl ti - rev" (it doesn't).
"""

from __future__ import annotations

import re
from collections.abc import Set as AbcSet

from phrase_tokenizer.token.special import parse_leaves
from phrase_tokenizer.types import BranchKind, BranchToken, Token

__all__ = [
    "SUB_PHRASE_DELIMITERS",
    "split_sub_phrases",
]

# Priority order: at any position the first delimiter listed wins
SUB_PHRASE_DELIMITERS: tuple[str, ...] = (
    " & ",
    " + ",
    ", ",
    "- ",
    "– ",  # en dash
    "— ",  # em dash
    ": ",
    "; ",
    "< ",
    "<=",
    "=> ",
    "> ",
    ">=",
)

_SUB_PHRASE_RE = re.compile("|".join(re.escape(d) for d in SUB_PHRASE_DELIMITERS))

# "w/onions" → "onions"
_SHORTHAND_WITH_RE = re.compile(r"(?<!\S)w/")


def split_sub_phrases(raw: str, stop_words: AbcSet[str] | None = None) -> list[Token]:
    """
    Does: Strip the "w/" shorthand, split on sub-phrase delimiters and parse
          each piece; pieces yielding no tokens are dropped.
    Returns: The lone piece's leaves when one piece survives (a single
             sub-phrase has nothing to be unrelated to), else one SubPhrase
             branch per surviving piece.
    """
    raw = _SHORTHAND_WITH_RE.sub("", raw)

    branches: list[BranchToken] = []
    for piece in _SUB_PHRASE_RE.split(raw):
        leaves = parse_leaves(piece, stop_words)
        if leaves:
            branches.append(BranchToken(BranchKind.SUB_PHRASE, tuple(leaves)))

    if len(branches) == 1:
        return list(branches[0].children)
    return list(branches)
