"""
Letter Shuffle player.

Strategy:
  - Draw a random subset of the root's letters (random size 1..len(root)),
    shuffle it and submit the result.
  - Every submission is composable by construction; most are not words, some
    are too short, and occasionally the root itself comes back.

Useful as a noise baseline: it exercises the ignore and not-a-word paths and
keeps the dictionary oracle busy.
"""

from __future__ import annotations

from typing import Optional

from .base import BasePlayer, register


@register
class LetterShufflePlayer(BasePlayer):
    id = "letter_shuffle"
    name = "Letter Shuffle"
    version = "1.0.0"

    def next_word(self, state: dict) -> Optional[str]:
        if not self.root:
            return None
        k = self.rng.randint(1, len(self.root))
        letters = self.rng.sample(self.root, k)
        return "".join(letters)
