"""
Player-facing wording for rejections.

The reason tag is the contract; the wording here is what the bundled CLI
shows. Empty submissions and accepted words have no message.
"""

from __future__ import annotations

from typing import Optional, Tuple

from .validation import MIN_WORD_LENGTH, Outcome, Reason


def describe(outcome: Outcome, root: str,
             min_length: int = MIN_WORD_LENGTH) -> Optional[Tuple[str, str]]:
    """Return (title, message) for a visible rejection, else None."""
    if outcome.accepted or outcome.reason is Reason.EMPTY:
        return None

    if outcome.reason is Reason.ALREADY_USED:
        return "Word used already", "Be more original."
    if outcome.reason is Reason.NOT_SPELLABLE_FROM_ROOT:
        return "Word not possible", f"You can't spell that word from '{root}'!"
    if outcome.reason is Reason.NOT_A_REAL_WORD:
        return "Word not recognized", "You can't just make them up, you know!"
    if outcome.reason is Reason.TOO_SHORT:
        return "Word is too short", f"Words have to be at least {min_length} letters."
    if outcome.reason is Reason.SAME_AS_ROOT:
        return "Word is the same", "You cannot use the root word."
    raise ValueError(f"unhandled rejection reason: {outcome.reason}")
