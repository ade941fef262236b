"""
Lexicon Greedy player.

Strategy:
  - On reset, collect every lexicon word composable from the root (excluding
    the root itself and trivially short words).
  - Submit them longest first; ties keep lexicon order.
  - Never repeats a word, so a session only sees accepts (or oracle
    disagreements when the session's dictionary differs from the lexicon).

This is the upper-bound baseline: with the same lexicon backing the oracle it
reaches the maximum score available for the root.
"""

from __future__ import annotations

from typing import List, Optional

from wordscramble.config import MIN_WORD_LENGTH
from wordscramble.engine.letters import composable_words
from .base import BasePlayer, register


@register
class LexiconGreedyPlayer(BasePlayer):
    id = "lexicon_greedy"
    name = "Lexicon Greedy (longest first)"
    version = "1.0.0"

    def __init__(self):
        super().__init__()
        self._queue: List[str] = []

    def reset(self, *, root: str, lexicon: List[str], seed: int | None = None,
              min_length: int = MIN_WORD_LENGTH) -> None:
        super().reset(root=root, lexicon=lexicon, seed=seed, min_length=min_length)
        pool = [w for w in composable_words(root, self.lexicon)
                if len(w) >= self.min_length and w != root]
        # dedupe while keeping lexicon order, then stable sort by length
        pool = list(dict.fromkeys(pool))
        self._queue = sorted(pool, key=len, reverse=True)

    def next_word(self, state: dict) -> Optional[str]:
        if not self._queue:
            return None
        return self._queue.pop(0)
