"""
Running score for one session.

Three numbers are shown to the player:
  - word_count     : accepted words
  - letter_count   : total letters across accepted words
  - average_length : letter_count / word_count (0.0 before the first word)

Only accepted words are recorded, so there is no failure path here.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class ScoreState:
    """Immutable view of the score, safe to hand to a renderer."""
    word_count: int = 0
    letter_count: int = 0
    average_length: float = 0.0

    def as_dict(self) -> Dict:
        return asdict(self)


class ScoreTracker:
    def __init__(self):
        self.word_count: int = 0
        self.letter_count: int = 0
        self.average_length: float = 0.0

    def record(self, word: str) -> None:
        """Count one accepted word."""
        self.word_count += 1
        self.letter_count += len(word)
        self.average_length = self.letter_count / self.word_count

    def reset(self) -> None:
        self.word_count = 0
        self.letter_count = 0
        self.average_length = 0.0

    def snapshot(self) -> ScoreState:
        return ScoreState(self.word_count, self.letter_count, self.average_length)
