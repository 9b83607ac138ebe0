"""
Candidate-word validation.

This module answers the question: "Would this word be accepted right now?"
A candidate is accepted iff it passes, in this order:

  1) empty        : it is non-empty
  2) originality  : it has not been played yet in this session
  3) spellability : it can be spelled from the root word's letters
  4) realness     : the dictionary knows it in the session language
  5) length       : it has at least `min_length` letters
  6) distinctness : it is not the root word itself

The first failing rule decides the reported reason; later rules are not
evaluated. Cheap, specific checks come first so the reason shown to the
player is the most useful one.

Nothing here mutates state. The session owns the root word and history and
passes snapshots in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Collection, Optional

from packages.dictionary import BaseDictionary, DEFAULT_LANGUAGE
from .letters import can_spell

MIN_WORD_LENGTH = 3


class Reason(str, Enum):
    """Why a candidate was rejected. Values are stable tags."""
    EMPTY = "empty"
    ALREADY_USED = "already_used"
    NOT_SPELLABLE_FROM_ROOT = "not_spellable_from_root"
    NOT_A_REAL_WORD = "not_a_real_word"
    TOO_SHORT = "too_short"
    SAME_AS_ROOT = "same_as_root"


@dataclass(frozen=True)
class Outcome:
    """Accepted, or rejected with exactly one reason."""
    accepted: bool
    reason: Optional[Reason] = None

    def __post_init__(self):
        if self.accepted and self.reason is not None:
            raise ValueError(f"accepted outcome can't carry a reason; got {self.reason}")
        if not self.accepted and self.reason is None:
            raise ValueError("rejected outcome needs a reason")

    @classmethod
    def accept(cls) -> "Outcome":
        return ACCEPTED

    @classmethod
    def reject(cls, reason: Reason) -> "Outcome":
        return cls(accepted=False, reason=Reason(reason))

    @property
    def tag(self) -> str:
        """'accepted' or the rejection reason's tag (for logs and CSVs)."""
        return "accepted" if self.accepted else self.reason.value


ACCEPTED = Outcome(accepted=True)


def normalize(raw: str) -> str:
    """Lower-case and trim surrounding whitespace."""
    return raw.strip().lower()


def validate_word(
        candidate: str,
        root: str,
        used: Collection[str],
        dictionary: BaseDictionary,
        *,
        language: str = DEFAULT_LANGUAGE,
        min_length: int = MIN_WORD_LENGTH,
) -> Outcome:
    """
    Run the rule pipeline on an already-normalized `candidate`.

    Args:
      candidate  : normalized submission
      root       : the session's root word
      used       : words accepted so far
      dictionary : oracle consulted for realness
      language   : language tag passed to the oracle
      min_length : shortest acceptable word

    Raises:
      DictionaryUnavailable if the oracle can't answer for `language`.
    """
    if len(candidate) == 0:
        return Outcome.reject(Reason.EMPTY)

    if candidate in used:
        return Outcome.reject(Reason.ALREADY_USED)

    if not can_spell(candidate, root):
        return Outcome.reject(Reason.NOT_SPELLABLE_FROM_ROOT)

    if not dictionary.is_valid_word(candidate, language):
        return Outcome.reject(Reason.NOT_A_REAL_WORD)

    if len(candidate) < min_length:
        return Outcome.reject(Reason.TOO_SHORT)

    if candidate == root:
        return Outcome.reject(Reason.SAME_AS_ROOT)

    return ACCEPTED


class WordValidator:
    """validate_word with the dictionary, language and minimum length bound."""

    def __init__(self, dictionary: BaseDictionary, *, language: str = DEFAULT_LANGUAGE,
                 min_length: int = MIN_WORD_LENGTH):
        self.dictionary = dictionary
        self.language = language
        self.min_length = int(min_length)

    def validate(self, candidate: str, root: str, used: Collection[str]) -> Outcome:
        return validate_word(candidate, root, used, self.dictionary,
                             language=self.language, min_length=self.min_length)
