"""
Word-list dictionary oracle.

Backs recognition with a plain newline-delimited dictionary file per language
(or an in-memory word iterable). Each language's list is loaded lazily on its
first query into a set for O(1) membership checks, then reused.

Failure modes (all raise OracleUnavailableError):
  - the language has no configured list
  - the list file is missing or unreadable
  - the list contains no usable words
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Mapping, Set

from wordscramble.config import DEFAULT_LANGUAGE
from wordscramble.datasets.io import read_lines
from wordscramble.errors import OracleUnavailableError
from .base import BaseOracle, register

logger = logging.getLogger(__name__)


@register
class WordListOracle(BaseOracle):
    id = "wordlist"
    name = "Word List"

    def __init__(self, paths: Mapping[str, Path | str] | None = None, *,
                 words: Iterable[str] | None = None, language: str = DEFAULT_LANGUAGE):
        """
        Args:
          paths    : language tag -> dictionary file path
          words    : in-memory words for `language` (takes precedence over paths)
          language : tag the in-memory `words` belong to
        """
        self._paths: Dict[str, Path] = {lang: Path(p) for lang, p in (paths or {}).items()}
        self._loaded: Dict[str, Set[str]] = {}
        if words is not None:
            self._loaded[language] = {w.strip().lower() for w in words if w.strip()}

    def _lexicon(self, language: str) -> Set[str]:
        if language in self._loaded:
            return self._loaded[language]

        path = self._paths.get(language)
        if path is None:
            raise OracleUnavailableError(f"no dictionary configured for language {language!r}")

        try:
            lines = read_lines(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Dictionary for %s could not be read from %s: %s", language, path, e)
            raise OracleUnavailableError(f"dictionary for {language!r} unavailable: {e}") from e

        words = {ln.strip().lower() for ln in lines if ln.strip()}
        if not words:
            raise OracleUnavailableError(f"dictionary for {language!r} is empty: {path}")

        logger.info("Loaded %s dictionary words for %s from %s", len(words), language, path)
        self._loaded[language] = words
        return words

    def is_recognized_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if not word:
            return False
        return word.lower() in self._lexicon(language)
