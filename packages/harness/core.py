"""
Experiment harness core primitives.

- run_case:  play one session on a fixed root word with a given player.
- run_batch: run many sessions in sequence (optionally a sample prefix).
- summarize: aggregate statistics over a batch.

A case ends when the player has nothing left to try or the turn budget is
spent. These functions are UI-agnostic so they can be reused by a CLI app,
a notebook, or future services without changes.
"""

from __future__ import annotations
import time
from collections import Counter
from typing import Callable, Dict, Iterable, List, Tuple

import numpy as np

from packages.dictionary import BaseDictionary, DEFAULT_LANGUAGE
from packages.engine import GameSession, MIN_WORD_LENGTH, Reason, filter_spellable

DEFAULT_MAX_TURNS = 20


def run_case(
        player,
        root: str,
        *,
        dictionary: BaseDictionary,
        words: Iterable[str],
        language: str = DEFAULT_LANGUAGE,
        min_length: int = MIN_WORD_LENGTH,
        max_turns: int = DEFAULT_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Execute one session until the player gives up or the turn budget is spent.

    Args:
        player:     an object implementing BasePlayer with next_word(state)
        root:       the root word for this case
        dictionary: oracle used by the session
        words:      word pool the player draws candidates from
        max_turns:  number of submissions allowed
        seed:       RNG seed to make player choices reproducible

    Returns:
        dict with keys:
            root, word_count, letter_count, average_length,
            rejections (reason tag -> count), history (list[(word, tag)]),
            time_ms
    """
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")

    words = list(words)
    player.reset(words=words, seed=seed)

    session = GameSession(dictionary, language=language, min_length=min_length, seed=seed)
    session.start([root])

    candidates = filter_spellable(words, session.root_word, min_length=min_length)
    history: List[Tuple[str, str]] = []
    rejections: Counter[str] = Counter()

    t0 = time.time()
    for turn in range(1, max_turns + 1):
        state = {
            "turn": turn,
            "root": session.root_word,
            "used": list(session.used_words),
            "candidates": candidates,
            "rng": player.rng,
        }
        word = player.next_word(state)
        outcome = session.submit(word)

        # Empty means the player is out of ideas
        if outcome.reason is Reason.EMPTY:
            break

        history.append((word, outcome.tag))
        if outcome.accepted:
            candidates = [w for w in candidates if w != word.strip().lower()]
        else:
            rejections[outcome.tag] += 1

    dt = (time.time() - t0) * 1000.0
    score = session.score
    return {
        "root": session.root_word,
        "word_count": score.word_count,
        "letter_count": score.letter_count,
        "average_length": score.average_length,
        "rejections": dict(rejections),
        "history": history,
        "time_ms": dt,
    }


def run_batch(
        player,
        roots: List[str],
        *,
        dictionary: BaseDictionary,
        words: List[str],
        language: str = DEFAULT_LANGUAGE,
        min_length: int = MIN_WORD_LENGTH,
        max_turns: int = DEFAULT_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
        on_case: Callable[[int, int, Dict], None] | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K roots
    are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).

    `on_case(idx, total, result)` is called after each case (progress display).
    """
    pool = [r.strip().lower() for r in roots if r.strip()]
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    total = len(pool)
    for idx, root in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(
            player, root, dictionary=dictionary, words=words, language=language,
            min_length=min_length, max_turns=max_turns, seed=case_seed,
        )
        out.append(r)
        if on_case is not None:
            on_case(idx, total, r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch: mean/median/max of words found and average length,
    plus total rejections per reason.
    """
    if not results:
        return {"cases": 0}

    wc = np.array([r["word_count"] for r in results], dtype=float)
    avg = np.array([r["average_length"] for r in results], dtype=float)
    rejections: Counter[str] = Counter()
    for r in results:
        rejections.update(r.get("rejections", {}))

    return {
        "cases": len(results),
        "words_mean": float(wc.mean()),
        "words_median": float(np.median(wc)),
        "words_max": int(wc.max()),
        "avg_length_mean": float(avg.mean()),
        "avg_length_max": float(avg.max()),
        "rejections": {reason.value: rejections.get(reason.value, 0)
                       for reason in Reason if reason is not Reason.EMPTY},
    }
