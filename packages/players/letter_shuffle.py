"""
Letter Shuffle player.

Strategy:
  - Draw a random length between 2 and len(root) and shuffle that many of
    the root's letters into a "word".
  - Every so often, resubmit an earlier word or the root itself.

This mimics a careless human: most submissions are rejected, which makes it
useful for exercising every rejection path in batch runs.
"""

from __future__ import annotations

from typing import List
from .base import BasePlayer, register


@register
class LetterShufflePlayer(BasePlayer):
    id = "letter_shuffle"
    name = "Letter Shuffle"
    version = "1.0.0"

    # Chance of replaying a used word / the root instead of shuffling
    REPEAT_RATE = 0.1

    def next_word(self, state: dict) -> str:
        root: str = state["root"]
        used: List[str] = state["used"]

        roll = self.rng.random()
        if used and roll < self.REPEAT_RATE:
            return self.rng.choice(used)
        if roll < 2 * self.REPEAT_RATE:
            return root
        if len(root) < 2:
            return root

        k = self.rng.randint(2, len(root))
        letters = self.rng.sample(root, k)
        return "".join(letters)
