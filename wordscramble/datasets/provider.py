"""
Word list providers: the source of root words for new sessions.

A provider hands out one random word per call from a non-empty pool. When it
cannot (missing file, nothing usable in it, empty pool) it raises
StartupFailure, since no session can start without a root word.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable, List

from wordscramble.errors import StartupFailure
from .io import load_words

logger = logging.getLogger(__name__)


class BaseWordListProvider:
    def __init__(self, seed: int | None = None):
        self.rng = random.Random(seed)

    def words(self) -> List[str]:
        raise NotImplementedError("Override in subclass")

    def pick_random_word(self) -> str:
        pool = self.words()
        if not pool:
            raise StartupFailure("word list provider has no words to choose from")
        return self.rng.choice(pool)

    def __len__(self) -> int:
        return len(self.words())


class StaticWordListProvider(BaseWordListProvider):
    """In-memory pool. Blank and non-alphabetic entries are dropped, as for files."""

    def __init__(self, words: Iterable[str], seed: int | None = None):
        super().__init__(seed)
        self._words = [w.strip().lower() for w in words if w.strip().isalpha()]

    def words(self) -> List[str]:
        return self._words


class FileWordListProvider(BaseWordListProvider):
    """
    Newline-delimited word list on disk, loaded on first use and reused.
    Blank and non-alphabetic lines are skipped.
    """

    def __init__(self, path: Path | str, seed: int | None = None):
        super().__init__(seed)
        self.path = Path(path)
        self._words: List[str] | None = None

    def words(self) -> List[str]:
        if self._words is None:
            try:
                self._words = load_words(self.path)
            except (OSError, UnicodeDecodeError) as e:
                raise StartupFailure(f"could not load word list {self.path}: {e}") from e
            logger.info("Loaded %s root words from %s", len(self._words), self.path)
        return self._words
