# src/phrase_tokenizer/token/merge.py
# ──────────────────────────────────────────────────────────────
# Short-word merging over the parsed token tree
# ──────────────────────────────────────────────────────────────
"""
merge.

Does: Walk the token tree depth-first, reading its leaves as a tape, and merge
      short words (< 3 chars) with a neighbour instead of discarding them.
Returns: Tape (3-slot window state) and dfs_and_merge().
Used by: tokenizer.tokenize() between parsing and redundancy filtering.

Notes:
- "123 e grand" → "123 e", "e grand", "grand".
- A short word is appended to its left neighbour, and prepended to its right
  neighbour only within the same branch (bracket group or sub-phrase).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from phrase_tokenizer.types import BranchKind, BranchToken, LeafToken, Token, is_literal

__all__ = [
    "SHORT_WORD_LEN",
    "Tape",
    "dfs_and_merge",
]

# words shorter than this never stand alone
SHORT_WORD_LEN = 3


def _is_short(leaf: LeafToken) -> bool:
    return len(leaf.value) < SHORT_WORD_LEN


def _joined(a: LeafToken, b: LeafToken) -> LeafToken:
    return LeafToken.literal(f"{a.value} {b.value}")


# ──────────────────────────────────────────────────────────────
# 1) Tape: prev / current / next window
# ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Tape:
    """
    Three-slot window over the leaf stream.

    A leaf is emitted only once it reaches `prev`, its last chance before
    leaving the window, because `current` may still change how it is emitted.
    `leaf_index` counts leaves fed so far across the whole tree.
    """

    prev: LeafToken | None = None
    current: LeafToken | None = None
    next: LeafToken | None = None
    leaf_index: int = 0

    def advance(self, leaf: LeafToken | None) -> tuple[Tape, LeafToken | None]:
        """
        Does: Shift the window by one and decide how `prev` leaves it.
        Returns: (new tape, emitted leaf or None).
        """
        prev, current, nxt = self.current, self.next, leaf
        shifted = replace(self, prev=prev, current=current, next=nxt)

        if prev is None:
            return shifted, None

        if is_literal(prev) and is_literal(current):
            assert current is not None
            if _is_short(current):
                # append current; a short word must not stand alone at the
                # right edge, so drop it unless `next` can take it
                if not is_literal(nxt):
                    shifted = replace(shifted, current=None)
                return shifted, _joined(prev, current)
            if _is_short(prev):
                # prepend prev; current still goes out on its own later
                return shifted, _joined(prev, current)

        return shifted, prev

    def feed(self, leaf: LeafToken) -> tuple[Tape, LeafToken | None]:
        tape, emitted = self.advance(leaf)
        return replace(tape, leaf_index=tape.leaf_index + 1), emitted

    def exhaust(self) -> tuple[Tape, list[LeafToken]]:
        """Does: Drain prev/current so the next leaf starts a fresh tape."""
        out: list[LeafToken] = []
        tape = self
        for _ in range(2):
            tape, emitted = tape.advance(None)
            if emitted is not None:
                out.append(emitted)
        return tape, out


# ──────────────────────────────────────────────────────────────
# 2) Branch rules
# ──────────────────────────────────────────────────────────────


def _parenthetical_symbol(branch: BranchToken) -> LeafToken | None:
    """
    Does: Collapse a bracketed single character ("[P]" for "property") into
          one leaf "(p)".
    Returns: The symbol leaf, or None when the branch is not such a symbol.
    """
    if branch.kind is not BranchKind.PARENTHETICAL or len(branch.children) != 1:
        return None
    child = branch.children[0]
    if is_literal(child) and len(child.value) == 1:
        return LeafToken.literal(f"({child.value})")
    return None


def _can_stand_alone(branch: BranchToken) -> bool:
    # ≥2 children merge among themselves; a nested branch or a long leaf
    # needs nobody outside
    if len(branch.children) >= 2:
        return True
    only = branch.children[0]
    return isinstance(only, BranchToken) or len(only.value) >= SHORT_WORD_LEN


def _should_exhaust(tape: Tape, branch: BranchToken) -> bool:
    if tape.leaf_index == 0:
        # nothing on the tape yet
        return False
    if tape.leaf_index == 1 and tape.next is not None and _is_short(tape.next):
        # a short first leaf splices into this branch instead of standing alone
        return False
    return _can_stand_alone(branch)


# ──────────────────────────────────────────────────────────────
# 3) Depth-first walk
# ──────────────────────────────────────────────────────────────


def dfs_and_merge(tokens: Iterable[Token]) -> list[LeafToken]:
    """
    Does: Feed every leaf of the tree, in depth-first order, through one tape.
          A branch that can stand alone first exhausts the tape, so merging
          never crosses its boundary; a branch holding one short leaf is fed
          inline. The tape is exhausted once more at the end.
    Returns: Emitted leaves in order (may contain duplicates/prefixes).
    """
    out: list[LeafToken] = []
    tape = Tape()

    def feed(leaf: LeafToken) -> None:
        nonlocal tape
        tape, emitted = tape.feed(leaf)
        if emitted is not None:
            out.append(emitted)

    def exhaust() -> None:
        nonlocal tape
        tape, emitted = tape.exhaust()
        out.extend(emitted)

    def walk(nodes: Iterable[Token]) -> None:
        for node in nodes:
            if isinstance(node, LeafToken):
                feed(node)
                continue

            assert node.children, "empty branches are dropped before merging"

            symbol = _parenthetical_symbol(node)
            if symbol is not None:
                feed(symbol)
                continue

            if _should_exhaust(tape, node):
                exhaust()
            walk(node.children)

    walk(tokens)
    exhaust()
    return out
