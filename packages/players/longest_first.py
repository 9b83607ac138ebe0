"""
Longest-First player.

Picks the longest remaining candidate; ties are broken with the seeded RNG.
Long words raise average_length quickly, so this is the upper bound the
other players are compared against.
"""

from __future__ import annotations

from typing import List
from .base import BasePlayer, register


@register
class LongestFirstPlayer(BasePlayer):
    id = "longest_first"
    name = "Longest First"
    version = "1.0.0"

    def next_word(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        if not candidates:
            return ""

        best_len = max(len(w) for w in candidates)
        best_words = [w for w in candidates if len(w) == best_len]
        i = self.rng.randrange(len(best_words))
        return best_words[i]
