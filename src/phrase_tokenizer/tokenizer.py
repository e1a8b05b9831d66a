# tokenizer.py
from __future__ import annotations

"""
tokenizer.py
============

Does: Turn a short, noisy phrase (project code, client reference, address,
      name) into search-index tokens, keeping short words by merging them
      with a neighbour instead of dropping them.
Returns:
  - tokenize(phrase, stop_words) -> list[str]
  - parse_tree(phrase, stop_words) -> list[Token]
Used by: index-time and query-time callers alike, so both sides produce the
         same tokens.

Pipeline:
  normalize → graph parentheticals → sub-phrases → special tokens + words
  → depth-first short-word merge → redundancy filter
"""

import logging
from collections.abc import Set as AbcSet

from phrase_tokenizer.parenthetical import GraphOptions, graph_parentheticals
from phrase_tokenizer.token import (
    dfs_and_merge,
    noise_fallback,
    normalize_phrase,
    remove_noise,
    remove_redundant,
    split_sub_phrases,
)
from phrase_tokenizer.types import BranchKind, BranchToken, LeafKind, LeafToken, Token
from phrase_tokenizer.utils.log import debug, enabled

logger = logging.getLogger(__name__)

__all__ = [
    "tokenize",
    "parse_tree",
]


def _parse(token: Token, stop_words: AbcSet[str] | None) -> list[Token]:
    """
    Does: Expand a graphed node: a Raw leaf into sub-phrases/leaves, a
          Parenthetical into itself with parsed children.
    Returns: Parsed nodes; a parenthetical left with no children is dropped.
    """
    if isinstance(token, LeafToken):
        assert token.kind is LeafKind.RAW, f"unexpected leaf {token.kind}"
        return split_sub_phrases(token.value, stop_words)

    assert token.kind is BranchKind.PARENTHETICAL, f"unexpected branch {token.kind}"
    children = [parsed for child in token.children for parsed in _parse(child, stop_words)]
    if not children:
        return []
    return [BranchToken(token.kind, tuple(children))]


def parse_tree(phrase: str, stop_words: AbcSet[str] | None = None) -> list[Token]:
    """
    Does: Parse an already normalized, noise-free phrase into the token tree
          handed to the merger.
    Returns: Top-level nodes; every branch has at least one child.
    """
    graph = graph_parentheticals(phrase, GraphOptions.REMOVE_EMPTY_ENTRIES)
    return [parsed for node in graph for parsed in _parse(node, stop_words)]


def tokenize(phrase: str | None, stop_words: AbcSet[str] | None = None) -> list[str]:
    """
    Does: Tokenize `phrase` for search. Never raises on string input.
          When stop words remove everything, retries without them; when
          nothing at all survives, falls back to the phrase minus delimiters.
    Returns: Ordered, lowercase tokens with redundant prefixes removed.
    """
    normalized = normalize_phrase(phrase)
    if not normalized:
        return []

    tree = parse_tree(remove_noise(normalized), stop_words)
    tokens = [leaf.value for leaf in dfs_and_merge(tree)]
    if enabled("tokenize"):
        debug(f"tree for {normalized!r}: {[str(t) for t in tree]} → {tokens}")

    if not tokens:
        if stop_words is not None:
            logger.debug("All tokens of %r were stop words; retrying without.", normalized)
            return tokenize(normalized, None)
        logger.debug("No tokens in %r; using noise fallback.", normalized)
        return noise_fallback(normalized)

    result = remove_redundant(tokens)
    if enabled("tokenize"):
        debug(f"result: {result}", topic="tokenize")
    return result
