# apps/cli/play.py
"""
Interactive word-scramble game in the terminal.

This script:
  1) Loads the start-word list (fatal if it can't be read).
  2) Builds the dictionary oracle for the chosen language.
  3) Runs a prompt loop: each line is a submission; ':restart', ':hint'
     and ':quit' are commands.

The screen is redrawn from the session through a subscription, so the
session never knows it is being displayed.

The default dictionary is not bundled; run `python -m script.fetch_wordlist` first.
"""

from __future__ import annotations

import argparse
import random
import sys
from typing import List

from packages.datasets import load_start_words, WordListError
from packages.dictionary import DictionaryUnavailable, WordListDictionary
from packages.engine import GameSession, MIN_WORD_LENGTH, describe, filter_spellable

DEFAULT_START = "packages/datasets/data/start.txt"
DEFAULT_DICTIONARY = "packages/datasets/data/words_en.txt"
HINT_COUNT = 3


def render(session: GameSession) -> None:
    """Print root word, score and played words (most recent first)."""
    score = session.score
    print()
    print(f"== {session.root_word} ==")
    print(f"Number of words: {score.word_count}")
    print(f"Total letters: {score.letter_count}")
    print(f"Average letters per word: {score.average_length:.2f}")
    for word in session.used_words:
        print(f"  ({len(word)}) {word}")


def hint(session: GameSession, dictionary: WordListDictionary, language: str,
         rng: random.Random) -> List[str]:
    """Print up to HINT_COUNT masked words still to find; returns the picks.

    Draws from `rng`, never from the session RNG that picks root words.
    """
    found = filter_spellable(sorted(dictionary.words(language)), session.root_word,
                             min_length=session.validator.min_length,
                             exclude=session.used_words)
    if not found:
        print("No words left to find.")
        return []
    picks = rng.sample(found, min(HINT_COUNT, len(found)))
    print("Try: " + ", ".join(f"{w[0]}{'_' * (len(w) - 1)}" for w in picks)
          + f"  ({len(found)} left)")
    return picks


def main():
    """
    Parse CLI args, load word lists, and run the prompt loop.
    """
    ap = argparse.ArgumentParser(description="wordscramble — make words from a root word")
    ap.add_argument("--start-words", default=DEFAULT_START,
                    help="path to root-word candidates (one per line)")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY,
                    help="path to dictionary word list (one per line)")
    ap.add_argument("--language", default="en", help="language tag of the dictionary")
    ap.add_argument("--min-length", type=int, default=MIN_WORD_LENGTH,
                    help="shortest accepted word")
    ap.add_argument("--seed", type=int, help="RNG seed for root-word selection")
    args = ap.parse_args()

    # Missing resources abort startup; there is no degraded game
    try:
        start_words = load_start_words(args.start_words)
        dictionary = WordListDictionary(path=args.dictionary, language=args.language)
    except (WordListError, DictionaryUnavailable) as e:
        sys.stderr.write(f"error: {e}\n")
        sys.exit(1)

    session = GameSession(dictionary, language=args.language, min_length=args.min_length,
                          seed=args.seed)
    hint_rng = random.Random(args.seed)
    session.subscribe(render)
    session.start(start_words)
    print("Commands: :restart  :hint  :quit")

    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        cmd = line.strip().lower()
        if cmd == ":quit":
            break
        if cmd == ":restart":
            session.restart()
            continue
        if cmd == ":hint":
            hint(session, dictionary, args.language, hint_rng)
            continue

        outcome = session.submit(line)
        msg = describe(outcome, session.root_word, session.validator.min_length)
        if msg is not None:
            title, message = msg
            print(f"[{title}] {message}")


if __name__ == "__main__":
    main()
