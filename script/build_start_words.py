"""
Pick root-word candidates from a dictionary file.

Features:
- Keeps words of an exact length (8 by default: enough letters to play with).
- Optional minimum number of distinct letters (skips words like "assesses").
- Optional random sample of K words (deterministic by seed); otherwise all.
- Output is sorted and de-duplicated.

Usage:
    python -m script.build_start_words --in packages/datasets/data/words_en.txt \
        --out packages/datasets/data/start.txt --length 8 --sample 1000
"""

import argparse
import random
from pathlib import Path

from packages.datasets.io import load_words, write_lines


def select_roots(words: list[str], length: int, min_distinct: int = 0) -> list[str]:
    return sorted({w for w in words
                   if len(w) == length and w.isalpha() and len(set(w)) >= min_distinct})


def main():
    ap = argparse.ArgumentParser(description="Build the start-word list from a dictionary.")
    ap.add_argument("--in", dest="inp", required=True, help="dictionary .txt file")
    ap.add_argument("--out", default="packages/datasets/data/start.txt", help="output file")
    ap.add_argument("--length", type=int, default=8, help="root word length")
    ap.add_argument("--min-distinct", type=int, default=5, help="minimum distinct letters")
    ap.add_argument("--sample", type=int, help="keep only K random words")
    ap.add_argument("--seed", type=int, default=123)
    args = ap.parse_args()

    inp = Path(args.inp)
    if not inp.exists():
        raise FileNotFoundError(inp)

    roots = select_roots(load_words(inp), args.length, args.min_distinct)
    if args.sample and args.sample < len(roots):
        roots = sorted(random.Random(args.seed).sample(roots, args.sample))

    write_lines(roots, args.out)
    print(f"Input: {inp} -> Output: {args.out} ({len(roots)} root words)")


if __name__ == "__main__":
    main()
