"""
Word-list dictionary.

Loads one plain-text file per language (one word per line, UTF-8) into
memory at construction time. A file that can't be read makes the whole
oracle unusable, so construction fails with DictionaryUnavailable rather
than rejecting every word later.

Typical use:
    d = WordListDictionary(paths={"en": "packages/datasets/data/words_en.txt"})
    d.is_valid_word("fit", "en")
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, FrozenSet, Mapping, Set

from packages.datasets.io import load_words
from .base import BaseDictionary, DictionaryUnavailable, DEFAULT_LANGUAGE, register


@register
class WordListDictionary(BaseDictionary):
    id = "wordlist"
    name = "Word list file(s)"

    def __init__(self, paths: Mapping[str, Path | str] | None = None, *,
                 path: Path | str | None = None, language: str = DEFAULT_LANGUAGE):
        """
        Args:
          paths    : language tag -> word list path
          path     : shorthand for a single file (paired with `language`)
          language : tag used with `path`
        """
        all_paths: Dict[str, Path | str] = dict(paths or {})
        if path is not None:
            all_paths[language] = path
        if not all_paths:
            raise DictionaryUnavailable("wordlist dictionary needs at least one word list path")

        self._words: Dict[str, Set[str]] = {}
        for lang, p in all_paths.items():
            try:
                self._words[lang] = set(load_words(p))
            except FileNotFoundError as e:
                raise DictionaryUnavailable(f"word list for {lang!r} not found: {p}") from e

    @property
    def languages(self) -> FrozenSet[str]:
        return frozenset(self._words)

    def size(self, language: str = DEFAULT_LANGUAGE) -> int:
        """Number of distinct words loaded for `language`."""
        self._require_language(language)
        return len(self._words[language])

    def words(self, language: str = DEFAULT_LANGUAGE) -> Set[str]:
        """The loaded word set for `language` (do not mutate)."""
        self._require_language(language)
        return self._words[language]

    def is_valid_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        self._require_language(language)
        return word.lower() in self._words[language]
