"""
Game session: one playthrough against a single root word.

State:
  - root word  : chosen by the word list provider on start()
  - used words : accepted words, newest first
  - score      : sum of the lengths of the accepted words

Lifecycle:
  IDLE --start()--> ACTIVE --submit()*--> ACTIVE --start()--> ACTIVE ...

submit() runs the acceptance pipeline in a fixed order and stops at the
first failing rule:
  1) normalize (trim, lowercase)
  2) trivial      -> Ignored   (too short, or the root word itself)
  3) originality  -> Rejected(DUPLICATE_WORD)
  4) composable   -> Rejected(NOT_COMPOSABLE)
  5) recognized   -> Rejected(NOT_A_REAL_WORD | ORACLE_UNAVAILABLE)
  6) accept       -> Accepted(word, score)

Local checks run before the dictionary oracle, so the oracle is only asked
about words that could otherwise score. One session serves one player; it
holds no locks.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Tuple

from wordscramble.config import GameConfig
from wordscramble.datasets.provider import BaseWordListProvider
from wordscramble.errors import (
    Accepted, Ignored, OracleUnavailableError, Rejected, RejectionReason, SessionStateError,
    StartupFailure, SubmissionResult, rejection,
)
from wordscramble.oracles.base import BaseOracle
from .letters import can_form
from .validation import is_trivial, normalize

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"


class GameSession:
    def __init__(self, provider: BaseWordListProvider, oracle: BaseOracle,
                 config: GameConfig | None = None):
        self.provider = provider
        self.oracle = oracle
        self.config = config or GameConfig()

        self._state = SessionState.IDLE
        self._root: str | None = None
        self._used: List[str] = []
        self._score = 0

    # ---- read-only accessors ----

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def root_word(self) -> str | None:
        return self._root

    @property
    def used_words(self) -> Tuple[str, ...]:
        """Accepted words, newest first."""
        return tuple(self._used)

    @property
    def score(self) -> int:
        return self._score

    # ---- lifecycle ----

    def _clear(self) -> None:
        self._state = SessionState.IDLE
        self._root = None
        self._used = []
        self._score = 0

    def start(self) -> str:
        """
        Begin a new round (or restart the current one) with a fresh root word.

        Raises StartupFailure if the provider cannot supply a word; the session
        is then left IDLE with no root, words or score.
        """
        self._clear()
        try:
            root = normalize(self.provider.pick_random_word())
        except StartupFailure:
            logger.error("Session could not start: no root word available")
            raise
        if not root:
            raise StartupFailure("word list provider returned an empty word")

        self._root = root
        self._state = SessionState.ACTIVE
        logger.info("Session started with root word %r", root)
        return root

    def submit(self, raw: str) -> SubmissionResult:
        """
        Run one submission through the acceptance pipeline.

        Rejections are returned, never raised. Only calling this before
        start() raises (SessionStateError).
        """
        if self._state is not SessionState.ACTIVE or self._root is None:
            raise SessionStateError("submit() called before start()")

        root = self._root
        word = normalize(raw)

        if is_trivial(word, root, self.config.min_length):
            logger.debug("Ignored trivial submission %r", word)
            return Ignored(word)

        if word in self._used:
            return self._reject(word, RejectionReason.DUPLICATE_WORD)

        if not can_form(word, root):
            return self._reject(word, RejectionReason.NOT_COMPOSABLE)

        try:
            recognized = self.oracle.is_recognized_word(word, self.config.language)
        except OracleUnavailableError as e:
            logger.warning("Dictionary unavailable while checking %r: %s", word, e)
            return self._reject(word, RejectionReason.ORACLE_UNAVAILABLE)
        if not recognized:
            return self._reject(word, RejectionReason.NOT_A_REAL_WORD)

        self._used.insert(0, word)
        self._score += len(word)
        logger.debug("Accepted %r (score=%s)", word, self._score)
        return Accepted(word=word, score=self._score)

    def _reject(self, word: str, reason: RejectionReason) -> Rejected:
        logger.debug("Rejected %r: %s", word, reason.value)
        return rejection(word, reason, self._root or "")
