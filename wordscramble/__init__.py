from .config import GameConfig
from .errors import (
    Accepted, Ignored, Rejected, RejectionReason, SubmissionResult,
    WordScrambleError, StartupFailure, SessionStateError, OracleUnavailableError,
)
from .engine import GameSession, SessionState, can_form

__version__ = "0.1.0"

__all__ = [
    "GameConfig", "GameSession", "SessionState", "can_form",
    "Accepted", "Ignored", "Rejected", "RejectionReason", "SubmissionResult",
    "WordScrambleError", "StartupFailure", "SessionStateError", "OracleUnavailableError",
]
