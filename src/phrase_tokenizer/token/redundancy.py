# src/phrase_tokenizer/token/redundancy.py

"""
redundancy.py.

Does: Drop tokens that are the beginning of (or equal to) another token.
Returns: remove_redundant().
Used by: tokenizer.tokenize() as the last stage.
"""

from __future__ import annotations

__all__ = ["remove_redundant"]


def remove_redundant(tokens: list[str]) -> list[str]:
    """
    Does: Single pass, i from last to first, j forward over the survivors:
          token i is removed as soon as some other token starts with it.
          Not re-scanned to a fixpoint.
    Returns: New list; input is not modified.
    """
    out = list(tokens)
    if len(out) <= 1:
        return out

    for i in range(len(out) - 1, -1, -1):
        for j in range(len(out)):
            if i != j and out[j].startswith(out[i]):
                del out[i]
                break
    return out
