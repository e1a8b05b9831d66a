# src/phrase_tokenizer/token/normalize.py

"""
normalize.

Does: Normalize a phrase before parsing (trim + locale-independent lowercase),
      strip noise punctuation, and build the last-resort "noise" token.
Returns: normalize_phrase(), remove_noise(), noise_fallback().
Used by: tokenizer.tokenize().
"""

from __future__ import annotations

from phrase_tokenizer.token.words import SECONDARY_DELIMITERS

__all__ = [
    "NOISE_CHARACTERS",
    "normalize_phrase",
    "remove_noise",
    "noise_fallback",
]

# Non-delimiting punctuation: deleted, never split on
NOISE_CHARACTERS = "!\"#'*?^`"

_NOISE_TABLE = str.maketrans("", "", NOISE_CHARACTERS)
_DELIMITER_TABLE = str.maketrans("", "", " " + SECONDARY_DELIMITERS)


def normalize_phrase(phrase: str | None) -> str:
    """Does: Trim and lowercase. Returns: "" for None/blank input."""
    if not isinstance(phrase, str):
        return ""
    return phrase.strip().lower()


def remove_noise(phrase: str) -> str:
    return phrase.translate(_NOISE_TABLE)


def noise_fallback(phrase: str) -> list[str]:
    """
    Does: Keep whatever is left of a normalized phrase once spaces and
          delimiters are removed; noise characters are kept ("#?" → "#?").
    Returns: [remainder] or [].
    """
    noise = phrase.translate(_DELIMITER_TABLE)
    return [noise] if noise else []
