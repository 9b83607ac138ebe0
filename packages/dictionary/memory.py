"""
In-memory dictionary.

Backed by a plain set per language. Handy for tests, demos and for hosts
that already hold their word list in memory.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, Set

from .base import BaseDictionary, DEFAULT_LANGUAGE, register


@register
class SetDictionary(BaseDictionary):
    id = "memory"
    name = "In-memory word set"

    def __init__(self, words: Iterable[str] = (), language: str = DEFAULT_LANGUAGE):
        self._words: Dict[str, Set[str]] = {}
        self.add_language(language, words)

    def add_language(self, language: str, words: Iterable[str]) -> None:
        """Install (or replace) the word set for `language`."""
        self._words[language] = {w.strip().lower() for w in words if w.strip()}

    @property
    def languages(self) -> FrozenSet[str]:
        return frozenset(self._words)

    def is_valid_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        self._require_language(language)
        return word.lower() in self._words[language]
