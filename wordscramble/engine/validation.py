"""
Submission normalization and the trivial-submission check.

Every submission is normalized before any rule runs:
  - surrounding whitespace trimmed
  - lowercased

A normalized submission is *trivial* (silently ignored, no feedback) when:
  - it is shorter than the minimum length, or
  - it is exactly the root word.

The remaining rules (originality, composability, recognition) live in the
session because they need session state or the dictionary oracle.
"""

from __future__ import annotations

from wordscramble.config import MIN_WORD_LENGTH


def normalize(raw: str) -> str:
    """Lowercase and trim a raw submission."""
    return raw.strip().lower()


def is_trivial(word: str, root: str, min_length: int = MIN_WORD_LENGTH) -> bool:
    """
    Return True if a normalized `word` should be ignored outright.

    Notes:
      - `root` is compared as-is; sessions store it already normalized.
    """
    return len(word) < min_length or word == root
