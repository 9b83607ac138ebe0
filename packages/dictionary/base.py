from __future__ import annotations
from typing import Dict, FrozenSet, Type

DEFAULT_LANGUAGE = "en"

# ---- Global dictionary registry ----
REGISTRY: Dict[str, Type["BaseDictionary"]] = {}


class DictionaryUnavailable(RuntimeError):
    """The oracle cannot answer at all (missing data, unsupported language)."""


def register(cls: Type["BaseDictionary"]) -> Type["BaseDictionary"]:
    """
    Decorator: @register on a dictionary class adds it to REGISTRY by its `id`.
    """
    did = getattr(cls, "id", None)
    if not did:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if did in REGISTRY:
        raise ValueError(f"Duplicate dictionary id: {did}")
    REGISTRY[did] = cls
    return cls


# ---- Base class that dictionaries inherit ----
class BaseDictionary:
    """
    Answers "is this a real word in language L?".

    Implementations must give the same answer for the same word for as long
    as the instance lives; nothing is learned between lookups.
    """
    id = "base"
    name = "Base"

    @property
    def languages(self) -> FrozenSet[str]:
        return frozenset()

    def _require_language(self, language: str) -> None:
        if language not in self.languages:
            raise DictionaryUnavailable(
                f"{self.id} dictionary has no word list for language {language!r}; "
                f"available: {sorted(self.languages)}")

    def is_valid_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        raise NotImplementedError("Override in subclass")
