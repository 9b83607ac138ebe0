"""
Random Spellable player.

Strategy:
  - Choose uniformly at random from the words still spellable from the root
    and not yet played.

Notes:
  - Deterministic across runs with the same seed (via BasePlayer.rng).
  - Never triggers a rejection when its word pool is the game dictionary;
    a baseline to verify the pipeline end to end.
"""

from __future__ import annotations

from typing import List
from .base import BasePlayer, register


@register
class RandomSpellablePlayer(BasePlayer):
    id = "random_spellable"
    name = "Random Spellable"
    version = "1.0.0"

    def next_word(self, state: dict) -> str:
        """
        Args:
            state: dict with keys:
                - "candidates": spellable, unused words (List[str])
                - "rng":        random.Random initialized in reset()
        """
        candidates: List[str] = state["candidates"]
        if not candidates:
            return ""
        i = self.rng.randrange(len(candidates))
        return candidates[i]
