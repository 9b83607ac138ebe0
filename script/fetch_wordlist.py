"""
Download an English word list and write a clean dictionary file.

What it does:
- Downloads a plain-text word list (one word per line).
- Keeps lowercase a–z tokens only (drops proper nouns, digits, apostrophes).
- De-duplicates, sorts alphabetically, and writes to file.

Usage:
    python -m script.fetch_wordlist --out packages/datasets/data/words_en.txt
    python -m script.fetch_wordlist --url <other list> --min-length 2
"""

import re
import argparse
from pathlib import Path

import requests

URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words_alpha.txt"
WORD_RE = re.compile(r"^[a-z]+$")


def fetch_words(url: str = URL, min_length: int = 1) -> list[str]:
    r = requests.get(url, timeout=60)
    r.raise_for_status()
    words = set()
    for line in r.text.splitlines():
        w = line.strip()
        # Capitalized entries are proper nouns; skip rather than lowercase
        if len(w) >= min_length and WORD_RE.match(w):
            words.add(w)
    return sorted(words)


def main():
    ap = argparse.ArgumentParser(description="Download a dictionary word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="packages/datasets/data/words_en.txt")
    ap.add_argument("--min-length", type=int, default=1, help="drop words shorter than this")
    args = ap.parse_args()

    words = fetch_words(args.url, args.min_length)
    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"Wrote {len(words)} words -> {args.out}")


if __name__ == "__main__":
    main()
