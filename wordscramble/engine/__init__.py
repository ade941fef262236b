from .letters import can_form, composable_words, letter_counts
from .validation import normalize, is_trivial
from .session import GameSession, SessionState

__all__ = [
    "can_form", "composable_words", "letter_counts",
    "normalize", "is_trivial",
    "GameSession", "SessionState",
]
