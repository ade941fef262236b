"""
Game configuration and shared defaults.

Hosts (CLI apps, tests) build a GameConfig from their own flags; nothing here
reads files or environment variables.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_LANGUAGE = "en"

# Words shorter than this are trivial submissions (length <= 2 is ignored).
MIN_WORD_LENGTH = 3

DATA_DIR = Path(__file__).resolve().parent / "datasets" / "data"
DEFAULT_START_WORDS = DATA_DIR / "start.txt"
DEFAULT_LEXICON = DATA_DIR / "lexicon_en.txt"


@dataclass(frozen=True)
class GameConfig:
    language: str = DEFAULT_LANGUAGE
    min_length: int = MIN_WORD_LENGTH

    def __post_init__(self):
        if self.min_length < 1:
            raise ValueError(f"min_length must be >= 1; got {self.min_length}")
        if not self.language:
            raise ValueError("language must be a non-empty tag")
