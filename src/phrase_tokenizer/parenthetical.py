# src/phrase_tokenizer/parenthetical.py

"""
parenthetical.py.

Does: Find balanced bracket spans ((), [] and {}) tolerating improper nesting,
      and graph a phrase into a tree of Raw leaves and Parenthetical branches.
Returns: match_parenthetical(), graph_parentheticals(), GraphOptions.
Used by: tokenizer.tokenize() as the first parsing stage.

Notes:
- Improperly nested brackets never raise. "((abc)" matches "(abc)" and
  "(a{b)c}" matches "(a{b)".
"""

from __future__ import annotations

import enum
from collections.abc import Iterator

from phrase_tokenizer.types import BranchKind, BranchToken, LeafToken, Token

__all__ = [
    "GraphOptions",
    "MAX_NESTING",
    "match_parenthetical",
    "graph_parentheticals",
]

# closing bracket → its opening bracket
_OPENER_FOR: dict[str, str] = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_OPENER_FOR.values())

# deepest bracket level graphed as a branch; anything deeper stays Raw text
MAX_NESTING = 32


class GraphOptions(enum.Flag):
    NONE = 0
    # drop parentheticals such as "()" that hold nothing
    REMOVE_EMPTY_ENTRIES = enum.auto()


def _scan(s: str, offset: int) -> tuple[int, int, int]:
    """
    Does: Scan s[offset:] for the first balanced span.
    Returns: (start, end, first_open) where end is exclusive; start=-1 when
             nothing balanced. first_open is the outermost unmatched opener
             (or -1) so the caller can resume one past it.
    """
    stack: list[str] = []
    start = -1
    for i in range(offset, len(s)):
        ch = s[i]
        if ch in _OPENERS:
            if not stack:
                start = i
            stack.append(ch)
        elif ch in _OPENER_FOR and stack:
            opener = _OPENER_FOR[ch]
            # look past improperly nested openers for the nearest match
            for depth in range(len(stack) - 1, -1, -1):
                if stack[depth] == opener:
                    del stack[depth:]
                    if not stack:
                        return start, i + 1, -1
                    break
    return -1, -1, start if stack else -1


def match_parenthetical(s: str | None) -> tuple[str | None, int]:
    """
    Does: Match the first outermost, left-most balanced parenthetical in `s`.
          A closing bracket pops through the nearest matching opener anywhere
          on the stack; unmatched closers are ignored. When the scan ends
          unbalanced, scanning resumes one past the outermost opener.
    Returns: (span including its brackets, start index) or (None, -1).
    """
    if s is None:
        return None, -1

    offset = 0
    while offset < len(s):
        start, end, first_open = _scan(s, offset)
        if start >= 0:
            return s[start:end], start
        if first_open < 0 or first_open + 1 >= len(s):
            break
        offset = first_open + 1
    return None, -1


def graph_parentheticals(
    phrase: str | None,
    options: GraphOptions = GraphOptions.NONE,
) -> Iterator[Token]:
    """
    Does: Lazily convert `phrase` into top-level siblings: Raw leaves for
          unbracketed text and Parenthetical branches whose children are the
          graph of the bracket interior.
    Returns: Iterator of LeafToken(RAW) / BranchToken(PARENTHETICAL).
    """
    if phrase is None:
        return
    yield from _graph(phrase, options, 0)


def _graph(phrase: str, options: GraphOptions, depth: int) -> Iterator[Token]:
    text = phrase.strip()
    if depth >= MAX_NESTING:
        # deeper brackets stay in the text as plain delimiters
        if text:
            yield LeafToken.raw(text)
        return

    while text:
        span, index = match_parenthetical(text)
        if span is None:
            yield LeafToken.raw(text)
            return

        if index > 0:
            yield LeafToken.raw(text[:index])

        children: tuple[Token, ...] = ()
        if len(span) > 2:
            children = tuple(_graph(span[1:-1], options, depth + 1))

        if children or not (options & GraphOptions.REMOVE_EMPTY_ENTRIES):
            yield BranchToken(BranchKind.PARENTHETICAL, children)

        text = text[index + len(span) :].strip()
