from __future__ import annotations
import random
from typing import Dict, List, Optional, Type

from wordscramble.config import MIN_WORD_LENGTH

# ---- Global player registry ----
REGISTRY: Dict[str, Type["BasePlayer"]] = {}


def register(cls: Type["BasePlayer"]) -> Type["BasePlayer"]:
    """
    Decorator: @register on a player class adds it to REGISTRY by its `id`.
    """
    pid = getattr(cls, "id", None)
    if not pid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if pid in REGISTRY:
        raise ValueError(f"Duplicate player id: {pid}")
    REGISTRY[pid] = cls
    return cls


# ---- Base class that players inherit ----
class BasePlayer:
    """
    An automated player proposes one submission per turn for a session.
    Returning None means the player has nothing left to try.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.root: str = ""
        self.lexicon: List[str] = []
        self.min_length = MIN_WORD_LENGTH
        self.rng = random.Random()

    def reset(self, *, root: str, lexicon: List[str], seed: int | None = None,
              min_length: int = MIN_WORD_LENGTH) -> None:
        """Start a new session; `min_length` is the shortest word the session scores."""
        self.root = root
        self.lexicon = list(lexicon)
        self.min_length = min_length
        if seed is not None:
            self.rng.seed(seed)

    def next_word(self, state: dict) -> Optional[str]:
        raise NotImplementedError("Override in subclass")
