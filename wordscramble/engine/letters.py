"""
Letter multiset matching.

A word is *composable* from a source word when it can be spelled using only
the source's letters, each letter used at most as many times as it appears
in the source.

Conventions:
  - Case-sensitive: callers normalize before matching.
  - Pure: no normalization, no side effects.

Algorithm:
  - Treat `source` as a consumable multiset (Counter of remaining letters).
  - Walk `candidate` left-to-right, consuming one occurrence per character.
  - Fail as soon as a character has no remaining occurrence.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List


def letter_counts(word: str) -> Counter[str]:
    """Multiset of the characters in `word`."""
    return Counter(word)


def can_form(candidate: str, source: str) -> bool:
    """
    Return True if `candidate` can be spelled from the letters of `source`.

    Examples:
      can_form("silk", "silkworm")   -> True
      can_form("silks", "silkworm")  -> False   (needs two 's')
      can_form("Cat", "cat")         -> False   (case-sensitive)
    """
    remaining = letter_counts(source)
    for ch in candidate:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1  # consume one instance
    return True


def composable_words(source: str, words: Iterable[str]) -> List[str]:
    """
    Keep only the words that can be formed from `source` (order preserved).

    The source multiset is built once; each word is checked by frequency
    comparison, which agrees with `can_form` for every input.
    """
    available = letter_counts(source)
    out: List[str] = []
    for w in words:
        need = letter_counts(w)
        if all(available[ch] >= n for ch, n in need.items()):
            out.append(w)
    return out
