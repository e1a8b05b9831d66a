# src/phrase_tokenizer/token/special.py

"""
special.py.

Does: Extract composite "special" tokens that contain delimiters (abbreviations,
      dates, dollar amounts, NxN dimensions, numbers with units, decimals)
      before general word splitting would break them apart.
Returns: SpecialMatcher, SPECIAL_MATCHERS (priority order), parse_leaves().
Used by: subphrase.split_sub_phrases() for every sub-phrase of a Raw leaf.

Notes:
- Only the left-most match of the first matcher that matches is used per call.
  Text before it is re-parsed without that matcher (nor any tried before it);
  text after it is re-parsed with every matcher available again.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from collections.abc import Set as AbcSet
from dataclasses import dataclass

from phrase_tokenizer.token.words import split_words
from phrase_tokenizer.types import LeafToken

__all__ = [
    "SpecialMatcher",
    "SPECIAL_MATCHERS",
    "parse_leaves",
]


@dataclass(frozen=True)
class SpecialMatcher:
    """A named pattern plus the leaf it builds from a match."""

    name: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str]], LeafToken]

    def find(self, text: str) -> re.Match[str] | None:
        """Does: Find the left-most occurrence in `text`. Returns: match or None."""
        return self.pattern.search(text)


# W.O. / t.i.
_ABBREVIATION_RE = re.compile(r"(?:\w\.){2,}")

# 12/25/85, 12/25/1985
_DATE_RE = re.compile(r"\d{1,2}/\d{1,2}/\d{2}(?:\d{2})?")

# $0, $0.00, $1234, $1,234.00
_DOLLARS_RE = re.compile(r"\$(?:0|[1-9]\d{0,2}(?:,\d{3})+|\d+)(?:\.\d{2})?")

# 16 x 20
_DIMENSIONS_RE = re.compile(r"(\d+)\sx\s(\d+)")

# 10m, 10 m, 3in, 2,505 sf ; a lone compass letter (n/s/e/w) is not a unit
_NUMBER_WITH_UNIT_RE = re.compile(
    r"(?<!\S)([1-9](?:\d{0,2}(?:,\d{3})*|\d+))\s?(?![nsew](?=\s))([a-z]{1,2})(?=\s|$)"
)

# 1234.5, 1,234.5, -0.25
_DECIMAL_RE = re.compile(r"(?<!\S)-?(?:0|[1-9]\d{0,2}(?:,\d{3})+|\d+)\.\d+(?=\s|$)")


SPECIAL_MATCHERS: tuple[SpecialMatcher, ...] = (
    SpecialMatcher(
        "abbreviation",
        _ABBREVIATION_RE,
        lambda m: LeafToken.literal(m.group(0).replace(".", "")),
    ),
    SpecialMatcher("date", _DATE_RE, lambda m: LeafToken.date(m.group(0))),
    SpecialMatcher("dollars", _DOLLARS_RE, lambda m: LeafToken.dollars(m.group(0))),
    SpecialMatcher(
        "dimensions",
        _DIMENSIONS_RE,
        lambda m: LeafToken.dimensions(f"{m.group(1)}x{m.group(2)}"),
    ),
    SpecialMatcher(
        "number_with_unit",
        _NUMBER_WITH_UNIT_RE,
        lambda m: LeafToken.number(f"{m.group(1)}{m.group(2)}"),
    ),
    SpecialMatcher("decimal", _DECIMAL_RE, lambda m: LeafToken.number(m.group(0))),
)


def parse_leaves(
    raw: str,
    stop_words: AbcSet[str] | None = None,
    skip: frozenset[str] = frozenset(),
) -> list[LeafToken]:
    """
    Does: Parse a raw sub-phrase into leaves: first special token (by priority)
          split out, both sides re-parsed; otherwise general word splitting.
    Returns: Leaves in text order (special kinds or LITERAL).
    """
    leaves: list[LeafToken] = []
    tried = skip
    while raw:
        match = None
        for matcher in SPECIAL_MATCHERS:
            if matcher.name in tried:
                continue
            tried = tried | {matcher.name}
            match = matcher.find(raw)
            if match is not None:
                break

        if match is None:
            leaves.extend(split_words(raw, stop_words))
            break

        if match.start() > 0:
            # this and every earlier matcher already failed left of the match
            leaves.extend(parse_leaves(raw[: match.start()], stop_words, tried))
        leaves.append(matcher.build(match))

        # the rest of the text starts over with every matcher
        raw = raw[match.end() :]
        tried = frozenset()
    return leaves
