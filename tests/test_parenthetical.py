# tests/test_parenthetical.py
from __future__ import annotations

import pytest

from phrase_tokenizer.parenthetical import (
    GraphOptions,
    graph_parentheticals,
    match_parenthetical,
)
from phrase_tokenizer.types import BranchKind, BranchToken, LeafToken

"""
Tests: parenthetical.py

- match_parenthetical(): first outermost balanced span, tolerant of
  improperly nested brackets
- graph_parentheticals(): Raw leaves + Parenthetical branches, empty removal
"""


def _paren(*children):
    return BranchToken(BranchKind.PARENTHETICAL, children)


# ─────────────────────────────────────────────────────────────────────────────
# match_parenthetical
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("s", [None, ""])
def test_match_none_and_empty(s):
    assert match_parenthetical(s) == (None, -1)


@pytest.mark.parametrize(
    "phrase,expected_value,expected_index",
    [
        ("abc", None, -1),
        ("(abc)", "(abc)", 0),
        ("(abc)(def)", "(abc)", 0),
        ("abc(def)ghi", "(def)", 3),
        ("(abc(def)ghi)", "(abc(def)ghi)", 0),
        ("abc(def(ghi)jkl", "(ghi)", 7),       # unbalanced outer: resume inside
        ("abc)def(ghi)jkl", "(ghi)", 7),       # stray closer ignored
        ("abc[def]", "[def]", 3),
        ("abc[de{f]", "[de{f]", 3),            # inner opener discarded
        ("{abc}def", "{abc}", 0),
        ("abc[def(ghi)]jkl", "[def(ghi)]", 3),
        ("abc{def(ghi}jkl)", "{def(ghi}", 3),
        ("abc{def(ghi]jkl)", "(ghi]jkl)", 7),  # kinds never cross
        ("abc{def[ghi(jkl)lmn]opq}rst", "{def[ghi(jkl)lmn]opq}", 3),
        ("((abc)", "(abc)", 1),
        ("(a{b)c}", "(a{b)", 0),
        ("(", None, -1),
        (")(", None, -1),
        ("((((", None, -1),
    ],
)
def test_match_parenthetical(phrase, expected_value, expected_index):
    assert match_parenthetical(phrase) == (expected_value, expected_index)


@pytest.mark.parametrize("opener,closer", [("(", ")"), ("[", "]"), ("{", "}")])
@pytest.mark.parametrize("prefix,body,suffix", [("", "x", ""), ("ab ", "cd ef", " gh"), ("12-", "", "-34")])
def test_match_single_pair_returns_pair_and_offset(opener, closer, prefix, body, suffix):
    span = f"{opener}{body}{closer}"
    assert match_parenthetical(prefix + span + suffix) == (span, len(prefix))


# ─────────────────────────────────────────────────────────────────────────────
# graph_parentheticals
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "phrase,expected",
    [
        ("abc", [LeafToken.raw("abc")]),
        ("(abc)", [_paren(LeafToken.raw("abc"))]),
        (
            "1(abc)2(def)3",
            [
                LeafToken.raw("1"),
                _paren(LeafToken.raw("abc")),
                LeafToken.raw("2"),
                _paren(LeafToken.raw("def")),
                LeafToken.raw("3"),
            ],
        ),
        (
            "(abc(def))",
            [_paren(LeafToken.raw("abc"), _paren(LeafToken.raw("def")))],
        ),
        ("  ab [cd]  ", [LeafToken.raw("ab "), _paren(LeafToken.raw("cd"))]),
        ("()", [_paren()]),
    ],
)
def test_graph(phrase, expected):
    assert list(graph_parentheticals(phrase)) == expected


@pytest.mark.parametrize("phrase", [None, "", "   "])
def test_graph_blank_yields_nothing(phrase):
    assert list(graph_parentheticals(phrase)) == []


@pytest.mark.parametrize("phrase", ["()", "[()]", "( )", "{[ ]}"])
def test_graph_remove_empty_entries(phrase):
    assert list(graph_parentheticals(phrase, GraphOptions.REMOVE_EMPTY_ENTRIES)) == []


def test_graph_keeps_siblings_of_removed_empty():
    out = list(graph_parentheticals("a () b", GraphOptions.REMOVE_EMPTY_ENTRIES))
    assert out == [LeafToken.raw("a "), LeafToken.raw("b")]


def test_graph_is_lazy_generator():
    gen = graph_parentheticals("a(b)c")
    assert next(gen) == LeafToken.raw("a")


def test_branch_str_renders_kinds():
    tree = list(graph_parentheticals("a(b(c))"))
    assert [str(t) for t in tree] == ["a", "(b,(c))"]
    assert str(BranchToken(BranchKind.SUB_PHRASE, (LeafToken.literal("x"),))) == "{x}"
