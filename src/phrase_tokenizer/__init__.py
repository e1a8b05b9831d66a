"""
phrase_tokenizer
================

Does: Root package for the short-phrase search tokenizer.
Returns: tokenize(), match_parenthetical(), graph_parentheticals() and the
         token types, identical for index-time and query-time callers.
Used by: Indexing writers and query planners that need symmetric tokens.
"""

from .parenthetical import GraphOptions, graph_parentheticals, match_parenthetical
from .tokenizer import tokenize
from .types import BranchKind, BranchToken, LeafKind, LeafToken, Token

__all__: list[str] = [
    "tokenize",
    "match_parenthetical",
    "graph_parentheticals",
    "GraphOptions",
    "LeafKind",
    "BranchKind",
    "LeafToken",
    "BranchToken",
    "Token",
]
__docformat__ = "google"
