"""
Game session state machine.

    UNINITIALIZED --start()--> ACTIVE --start()/restart()--> ACTIVE

A session owns the root word, the used-word history (most recent first) and
the score. Validation is delegated to a WordValidator that only ever sees
snapshots of that state; the session applies the result.

Renderers can subscribe() to be called back after every state change
instead of polling.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Callable, Iterable, List, Sequence, Tuple

from packages.dictionary import BaseDictionary, DEFAULT_LANGUAGE
from .scoring import ScoreState, ScoreTracker
from .validation import MIN_WORD_LENGTH, Outcome, Reason, WordValidator, normalize

# Used only when the supplied word list has no usable entries.
DEFAULT_ROOT_WORD = "silkworm"

Listener = Callable[["GameSession"], None]


class SessionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"


class SessionNotStarted(RuntimeError):
    """submit()/restart() called before start()."""


class GameSession:
    def __init__(self, dictionary: BaseDictionary, *, language: str = DEFAULT_LANGUAGE,
                 min_length: int = MIN_WORD_LENGTH, seed: int | None = None):
        self.validator = WordValidator(dictionary, language=language, min_length=min_length)
        self.rng = random.Random(seed)
        self.state = SessionState.UNINITIALIZED

        self._word_list: List[str] = []
        self._root_word = ""
        self._used: List[str] = []
        self._score = ScoreTracker()
        self._listeners: List[Listener] = []

    # ---- read-only views ----

    @property
    def root_word(self) -> str:
        return self._root_word

    @property
    def used_words(self) -> Tuple[str, ...]:
        return tuple(self._used)

    @property
    def score(self) -> ScoreState:
        return self._score.snapshot()

    @property
    def word_list(self) -> Tuple[str, ...]:
        return tuple(self._word_list)

    # ---- observers ----

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ---- transitions ----

    def start(self, word_list: Sequence[str] | None) -> str:
        """
        Begin a round with a root word drawn uniformly from `word_list`.

        Blank entries are dropped. An empty list falls back to
        DEFAULT_ROOT_WORD; `None` means the list could not be obtained at all.

        Returns the new root word.
        """
        if word_list is None:
            raise ValueError("start() needs a word list; got None")
        self._word_list = [w.strip().lower() for w in word_list if w.strip()]
        return self._new_round()

    def restart(self) -> str:
        """New round from the already-loaded word list."""
        self._require_active()
        return self._new_round()

    def _new_round(self) -> str:
        if self._word_list:
            self._root_word = self._word_list[self.rng.randrange(len(self._word_list))]
        else:
            self._root_word = DEFAULT_ROOT_WORD
        self._used = []
        self._score.reset()
        self.state = SessionState.ACTIVE
        self._notify()
        return self._root_word

    def submit(self, raw: str) -> Outcome:
        """
        Validate one submission and, if accepted, apply it.

        Rejections leave the session untouched.
        """
        self._require_active()

        candidate = normalize(raw)
        if not candidate:
            return Outcome.reject(Reason.EMPTY)

        outcome = self.validator.validate(candidate, self._root_word, self._used)
        if outcome.accepted:
            self._used.insert(0, candidate)
            self._score.record(candidate)
            self._notify()
        return outcome

    def _require_active(self) -> None:
        if self.state is not SessionState.ACTIVE:
            raise SessionNotStarted("call start() with a word list first")

    def play(self, words: Iterable[str]) -> List[Outcome]:
        """Submit several words in order; returns one outcome per word."""
        return [self.submit(w) for w in words]
