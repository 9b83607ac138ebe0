# apps/cli/run.py
"""
CLI entry point for running wordscramble player experiments.

This script:
  1) Validates the word lists (prints counts + SHA, checks start ⊆ dictionary).
  2) Loads the lists and instantiates the requested player.
  3) Plays one session per root word with a live progress indicator and writes:
       - CSV:  per-session results (score, rejection counts, words found)
       - JSON: manifest with config, word-list hashes, git commit, summary

The default dictionary is not bundled; run `python -m script.fetch_wordlist` first.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from packages.datasets import validate_wordlists, pretty_summary, load_start_words, WordListError
from packages.dictionary import DictionaryUnavailable, WordListDictionary
from packages.engine import MIN_WORD_LENGTH
from packages.harness import run_batch, summarize
from packages.harness.core import DEFAULT_MAX_TURNS
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.players import create_player, get_player_ids


def main():
    """
    Parse CLI args, validate datasets, run the batch with progress, and write outputs.
    """
    player_choices = ", ".join(get_player_ids())

    ap = argparse.ArgumentParser(description="wordscramble — run player experiments")
    ap.add_argument("--player", default="random_spellable",
                    help=f"player id (one of: {player_choices})")
    ap.add_argument("--start-words", default="packages/datasets/data/start.txt",
                    help="path to root-word candidates")
    ap.add_argument("--dictionary", default="packages/datasets/data/words_en.txt",
                    help="path to dictionary word list")
    ap.add_argument("--language", default="en", help="language tag of the dictionary")
    ap.add_argument("--min-length", type=int, default=MIN_WORD_LENGTH,
                    help="shortest accepted word")
    ap.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS,
                    help="submissions per session")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of root words (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.start_words, args.dictionary, min_length=args.min_length)
    print(pretty_summary(rep))

    # 2) Load lists (fatal if unavailable)
    try:
        roots = load_start_words(args.start_words)
        dictionary = WordListDictionary(path=args.dictionary, language=args.language)
    except (WordListError, DictionaryUnavailable) as e:
        sys.stderr.write(f"error: {e}\n")
        sys.exit(1)
    words = sorted(dictionary.words(args.language))

    # 3) Instantiate player by id
    player = create_player(args.player)

    # 4) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(roots):
        pool = list(roots)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(roots)

    # 5) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    start = time.time()
    last_print = 0.0
    bar = tqdm(total=len(cases), ncols=80, desc="Playing", unit="game") if mode == "bar" else None

    def on_case(idx: int, total: int, r: dict) -> None:
        nonlocal last_print
        r["player_id"] = player.id
        if bar is not None:
            bar.update(1)
        elif mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    # 6) Run batch with live progress (per-case seed = seed + index)
    results = run_batch(
        player, cases, dictionary=dictionary, words=words, language=args.language,
        min_length=args.min_length, max_turns=args.max_turns, seed=args.seed, on_case=on_case,
    )

    if bar is not None:
        bar.close()
    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 7) Write outputs (CSV + manifest)
    summary = summarize(results)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "num_cases": len(results),
        "player_id": player.id,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    if results:
        print(f"words/game: mean={summary['words_mean']:.2f} median={summary['words_median']:.1f} "
              f"max={summary['words_max']} | avg length mean={summary['avg_length_mean']:.2f}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
