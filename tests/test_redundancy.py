# tests/test_redundancy.py
from __future__ import annotations

import pytest

from phrase_tokenizer.token.redundancy import remove_redundant


@pytest.mark.parametrize(
    "tokens,expected",
    [
        ([], []),
        (["solo"], ["solo"]),
        (["mahi", "mahi"], ["mahi"]),
        (["chairperson", "took", "chair"], ["chairperson", "took"]),
        (["bp24", "00034", "bp24", "00035"], ["bp24", "00034", "00035"]),
        (["ab cde", "cde"], ["ab cde", "cde"]),             # suffix is not a prefix
        (["residential", "residential", "additions ti"], ["residential", "additions ti"]),
        # chain: only the longest of a prefix chain survives, wherever it sits
        (["a", "ab", "abc"], ["abc"]),
        (["abc", "ab", "a"], ["abc"]),
        (["x", "x", "x"], ["x"]),
        # empty string is a prefix of everything
        (["", "a"], ["a"]),
    ],
)
def test_remove_redundant(tokens, expected):
    assert remove_redundant(tokens) == expected


def test_remove_redundant_does_not_mutate_input():
    tokens = ["mahi", "mahi"]
    remove_redundant(tokens)
    assert tokens == ["mahi", "mahi"]


def test_first_of_equal_tokens_survives():
    # the backward scan removes later duplicates first
    out = remove_redundant(["b", "a", "b"])
    assert out == ["b", "a"]
