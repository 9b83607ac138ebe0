from .letters import can_spell, letter_counts
from .validation import (ACCEPTED, MIN_WORD_LENGTH, Outcome, Reason, WordValidator,
                         normalize, validate_word)
from .scoring import ScoreState, ScoreTracker
from .session import DEFAULT_ROOT_WORD, GameSession, SessionNotStarted, SessionState
from .constraints import filter_spellable
from .messages import describe

__all__ = [
    "can_spell", "letter_counts",
    "ACCEPTED", "MIN_WORD_LENGTH", "Outcome", "Reason", "WordValidator", "normalize",
    "validate_word",
    "ScoreState", "ScoreTracker",
    "DEFAULT_ROOT_WORD", "GameSession", "SessionNotStarted", "SessionState",
    "filter_spellable", "describe",
]
