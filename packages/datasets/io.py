from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


class WordListError(RuntimeError):
    """The start-word list could not be obtained; the game can't begin."""


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_words(p: Path | str) -> List[str]:
    """
    Read a newline-separated word list, normalize to lowercase, drop blanks.
    """
    return [w.strip().lower() for w in read_lines(p) if w.strip()]


def load_start_words(p: Path | str) -> List[str]:
    """
    Load the root-word candidates for a game.

    Raises WordListError if the file is missing or holds no words.
    """
    try:
        words = load_words(p)
    except FileNotFoundError as e:
        raise WordListError(f"Could not load start words from {p}") from e
    if not words:
        raise WordListError(f"Start word list is empty: {p}")
    return words
