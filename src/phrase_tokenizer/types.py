# src/phrase_tokenizer/types.py
from __future__ import annotations

"""
types.py.

Does: Define the token tree produced while tokenizing a phrase:
      LeafToken (kind + value) and BranchToken (kind + ordered children).
Returns: LeafKind, BranchKind, LeafToken, BranchToken, Token, is_literal().
Used by: parenthetical graphing, leaf parsing, short-word merging.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

__all__ = [
    "LeafKind",
    "BranchKind",
    "LeafToken",
    "BranchToken",
    "Token",
    "is_literal",
]


class LeafKind(Enum):
    DATE = "date"
    DIMENSIONS = "dimensions"
    DOLLARS = "dollars"
    LITERAL = "literal"
    NUMBER = "number"
    RAW = "raw"


class BranchKind(Enum):
    PARENTHETICAL = "parenthetical"
    SUB_PHRASE = "sub_phrase"


@dataclass(frozen=True)
class LeafToken:
    """Atomic token. RAW leaves exist only until word splitting."""

    kind: LeafKind
    value: str

    @classmethod
    def raw(cls, value: str) -> LeafToken:
        return cls(LeafKind.RAW, value)

    @classmethod
    def literal(cls, value: str) -> LeafToken:
        return cls(LeafKind.LITERAL, value)

    @classmethod
    def date(cls, value: str) -> LeafToken:
        return cls(LeafKind.DATE, value)

    @classmethod
    def dimensions(cls, value: str) -> LeafToken:
        return cls(LeafKind.DIMENSIONS, value)

    @classmethod
    def dollars(cls, value: str) -> LeafToken:
        # $1,234.00 → $1234.00
        return cls(LeafKind.DOLLARS, value.replace(",", ""))

    @classmethod
    def number(cls, value: str) -> LeafToken:
        return cls(LeafKind.NUMBER, value.replace(",", ""))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BranchToken:
    """Token with ordered children: a bracketed group or a sub-phrase."""

    kind: BranchKind
    children: tuple[Token, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # accept any iterable, store an immutable tuple
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def __str__(self) -> str:
        content = ",".join(str(child) for child in self.children)
        if self.kind is BranchKind.PARENTHETICAL:
            return f"({content})"
        return f"{{{content}}}"


Token = Union[LeafToken, BranchToken]


def is_literal(token: Token | None) -> bool:
    """Does: True for a LITERAL leaf (the only kind eligible for short-word merging)."""
    return isinstance(token, LeafToken) and token.kind is LeafKind.LITERAL
