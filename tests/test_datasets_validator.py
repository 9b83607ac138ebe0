from pathlib import Path

import pytest
from packages.datasets import (validate_wordlists, pretty_summary, load_words, load_start_words,
                               WordListError)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    start = tmp_path / "start.txt"
    words = tmp_path / "words_en.txt"
    _write(start, ["silkworm", "absolute"])
    _write(words, ["silkworm", "absolute", "silk", "worm", "lute"])

    rep = validate_wordlists(str(start), str(words))
    assert rep["passed"] is True
    assert rep["start_subset_dictionary"] is True
    assert rep["start"]["count"] == 2
    s = pretty_summary(rep)
    assert "start=2" in s and "start⊆dictionary=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    start = tmp_path / "start.txt"
    words = tmp_path / "words_en.txt"
    # 'ox' is too short, 'Swift' is not lowercase, '???' invalid chars
    start.write_text("silkworm\nox\nSwift\n???\n", encoding="utf-8")
    words.write_text("silkworm\nsilk\n", encoding="utf-8")

    rep = validate_wordlists(str(start), str(words))
    assert rep["passed"] is False
    assert rep["start"]["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    start = tmp_path / "start.txt"
    words = tmp_path / "words_en.txt"
    _write(start, ["silkworm", "absolute"])
    _write(words, ["silkworm"])

    rep = validate_wordlists(str(start), str(words))
    assert rep["passed"] is False
    assert rep["start_subset_dictionary"] is False
    assert any("subset" in msg for msg in rep["issues"])


def test_validate_wordlists_allows_short_dictionary_words(tmp_path: Path):
    start = tmp_path / "start.txt"
    words = tmp_path / "words_en.txt"
    _write(start, ["swift"])
    _write(words, ["a", "is", "fit", "swift"])

    rep = validate_wordlists(str(start), str(words))
    assert rep["passed"] is True
    assert rep["dictionary"]["invalid_lines"] == 0
    assert rep["dictionary"]["count"] == 4
    assert rep["issues"] == []


def test_validate_wordlists_short_start_word_still_invalid(tmp_path: Path):
    start = tmp_path / "start.txt"
    words = tmp_path / "words_en.txt"
    _write(start, ["swift", "is"])
    _write(words, ["is", "swift"])

    rep = validate_wordlists(str(start), str(words))
    assert rep["passed"] is False
    assert rep["start"]["invalid_lines"] == 1
    assert rep["dictionary"]["invalid_lines"] == 0


def test_validate_wordlists_missing_files(tmp_path: Path):
    rep = validate_wordlists(str(tmp_path / "a.txt"), str(tmp_path / "b.txt"))
    assert rep["passed"] is False
    assert len(rep["issues"]) == 2
    assert "FAIL" in pretty_summary(rep)


def test_load_words_normalizes(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("Silkworm\r\n\n  absolute \n", encoding="utf-8")
    assert load_words(p) == ["silkworm", "absolute"]


def test_load_start_words_missing_is_fatal(tmp_path: Path):
    with pytest.raises(WordListError):
        load_start_words(tmp_path / "start.txt")


def test_load_start_words_empty_is_fatal(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("\n\n", encoding="utf-8")
    with pytest.raises(WordListError):
        load_start_words(p)


def test_bundled_start_list_is_clean():
    p = Path(__file__).resolve().parent.parent / "packages" / "datasets" / "data" / "start.txt"
    words = load_start_words(p)
    assert len(words) == len(set(words))
    assert all(w.isalpha() and w.islower() for w in words)
