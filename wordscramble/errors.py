"""
Error taxonomy and submission results.

Fatal and programming errors are exceptions:
  - StartupFailure      : no root word could be obtained; the session stays idle.
  - SessionStateError   : submit() called before start().
  - OracleUnavailableError : raised by dictionary oracles when they cannot
                          answer; the session turns it into a rejection.

Recoverable outcomes of a submission are values, never raised:
  - Accepted(word, score)
  - Rejected(word, reason, title, message)
  - Ignored(word)        : trivial submission (too short, or the root itself)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class WordScrambleError(Exception):
    """Base class for all engine errors."""


class StartupFailure(WordScrambleError):
    """The word list provider could not supply a root word."""


class SessionStateError(WordScrambleError):
    """An operation was called in a state that does not allow it."""


class OracleUnavailableError(WordScrambleError):
    """The dictionary oracle could not answer a recognition query."""


class RejectionReason(str, Enum):
    DUPLICATE_WORD = "duplicate_word"
    NOT_COMPOSABLE = "not_composable"
    NOT_A_REAL_WORD = "not_a_real_word"
    ORACLE_UNAVAILABLE = "oracle_unavailable"


# Player-facing (title, message) per reason. `{root}` is filled at rejection time.
REJECTION_TEXT = {
    RejectionReason.DUPLICATE_WORD: ("Word used already", "Be more original"),
    RejectionReason.NOT_COMPOSABLE: ("Word not possible", "You can't spell that word from '{root}'!"),
    RejectionReason.NOT_A_REAL_WORD: ("Word not recognized", "You can't just make them up, you know!"),
    RejectionReason.ORACLE_UNAVAILABLE: ("Dictionary unavailable",
                                         "Couldn't check that word right now, try again."),
}


@dataclass(frozen=True)
class Accepted:
    word: str
    score: int  # session score after this word

    @property
    def outcome(self) -> str:
        return "accepted"


@dataclass(frozen=True)
class Rejected:
    word: str
    reason: RejectionReason
    title: str
    message: str

    @property
    def outcome(self) -> str:
        return self.reason.value


@dataclass(frozen=True)
class Ignored:
    word: str

    @property
    def outcome(self) -> str:
        return "ignored"


SubmissionResult = Union[Accepted, Rejected, Ignored]


def rejection(word: str, reason: RejectionReason, root: str) -> Rejected:
    """Build a Rejected result with its player-facing text."""
    title, message = REJECTION_TEXT[reason]
    return Rejected(word=word, reason=reason, title=title, message=message.format(root=root))
