# src/phrase_tokenizer/token/__init__.py
"""
token.
=====

Does: Provide the leaf-level tokenization stages: normalization, special token
      extraction, sub-phrase and word splitting, short-word merging and
      redundancy filtering.
Exports: normalize_phrase, remove_noise, noise_fallback, split_words,
         parse_leaves, split_sub_phrases, dfs_and_merge, remove_redundant
Used by: phrase_tokenizer.tokenizer.
"""

from __future__ import annotations

from .words import split_words
from .special import SPECIAL_MATCHERS, SpecialMatcher, parse_leaves
from .subphrase import split_sub_phrases
from .merge import Tape, dfs_and_merge
from .redundancy import remove_redundant
from .normalize import noise_fallback, normalize_phrase, remove_noise

__all__ = [
    # normalize
    "normalize_phrase",
    "remove_noise",
    "noise_fallback",
    # split
    "split_words",
    "split_sub_phrases",
    # special
    "SpecialMatcher",
    "SPECIAL_MATCHERS",
    "parse_leaves",
    # merge
    "Tape",
    "dfs_and_merge",
    # redundancy
    "remove_redundant",
]
