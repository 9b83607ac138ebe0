"""
Spellable-word filtering for a root word.

Given:
  - a pool of words (e.g., a dictionary word list)
  - the session's root word
  - words already played

Return:
  - words that would currently pass the letter, length, root and
    originality rules (dictionary membership is implied by the pool).

Players use this to propose moves; the interactive CLI uses it for hints.
"""

from __future__ import annotations

from typing import Iterable, List, Set

from .letters import can_spell
from .validation import MIN_WORD_LENGTH


def filter_spellable(
        words: Iterable[str],
        root: str,
        *,
        min_length: int = MIN_WORD_LENGTH,
        exclude: Iterable[str] = (),
) -> List[str]:
    """
    Keep words (normalized to lowercase) that are spellable from `root`.

    Args:
      words      : iterable of candidate words
      root       : root word (already lowercase)
      min_length : shortest acceptable word
      exclude    : words to skip (typically the used-word history)

    Returns:
      List[str] in input order, without duplicates.
    """
    skip: Set[str] = set(exclude)
    seen: Set[str] = set()
    out: List[str] = []

    for w in words:
        w = w.strip().lower()

        # Basic hygiene: alphabetic tokens of acceptable length only
        if len(w) < min_length or not w.isalpha():
            continue
        if w == root or w in skip or w in seen:
            continue

        if can_spell(w, root):
            seen.add(w)
            out.append(w)

    return out
