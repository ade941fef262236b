"""
Lexicon Random player.

Strategy:
  - Choose uniformly at random (with replacement) from the lexicon words
    composable from the root.
  - Repeats are allowed on purpose, so duplicate rejections show up in runs.

Notes:
  - Deterministic across runs with the same seed (via BasePlayer.rng).
  - Returns None only if the root admits no lexicon word at all.
"""

from __future__ import annotations

from typing import List, Optional

from wordscramble.config import MIN_WORD_LENGTH
from wordscramble.engine.letters import composable_words
from .base import BasePlayer, register


@register
class LexiconRandomPlayer(BasePlayer):
    id = "lexicon_random"
    name = "Lexicon Random"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self._pool: List[str] = []

    def reset(self, *, root: str, lexicon: List[str], seed: int | None = None,
              min_length: int = MIN_WORD_LENGTH) -> None:
        super().reset(root=root, lexicon=lexicon, seed=seed, min_length=min_length)
        self._pool = composable_words(root, self.lexicon)

    def next_word(self, state: dict) -> Optional[str]:
        if not self._pool:
            return None
        return self._pool[self.rng.randrange(len(self._pool))]
