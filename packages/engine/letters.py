"""
Letter budget of a root word.

A root word is treated as a multiset of letters: each letter may be used
as many times as it occurs in the root, and no more.

  can_spell("fit", "swift")    -> True
  can_spell("swiftt", "swift") -> False   (only one 't' available)

Both arguments are compared as given. Callers normalize case beforehand
(the session lower-cases candidates; root words are lower-cased on load).
"""

from __future__ import annotations

from collections import Counter


def letter_counts(word: str) -> Counter[str]:
    """Per-letter counts of `word`."""
    return Counter(word)


def can_spell(candidate: str, root: str) -> bool:
    """
    Return True if every character of `candidate` can be taken from `root`.

    Letters are consumed one at a time in candidate order; the check stops
    at the first letter with no remaining copy in the budget.
    """
    remaining = letter_counts(root)
    for ch in candidate:
        if remaining[ch] > 0:
            remaining[ch] -= 1
        else:
            return False
    return True
