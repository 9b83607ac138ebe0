from pathlib import Path
import csv
import json

from packages.dictionary import SetDictionary
from packages.harness import run_case, run_batch, summarize, write_csv, write_manifest
from packages.players import create_player

WORDS = ["fit", "wit", "sit", "its", "wits", "fist", "swift", "silk", "worm", "milk", "silo"]


def test_run_case_smoke():
    player = create_player("random_spellable")
    r = run_case(player, "swift", dictionary=SetDictionary(WORDS), words=WORDS, seed=42)
    # every spellable word except the root itself
    assert r["word_count"] == 6
    assert r["rejections"] == {}
    assert r["letter_count"] == sum(len(w) for w, _ in r["history"])
    assert all(tag == "accepted" for _, tag in r["history"])


def test_run_case_respects_max_turns():
    player = create_player("random_spellable")
    r = run_case(player, "swift", dictionary=SetDictionary(WORDS), words=WORDS,
                 max_turns=2, seed=1)
    assert r["word_count"] == 2
    assert len(r["history"]) == 2


def test_run_batch_and_summary(tmp_path: Path):
    player = create_player("longest_first")
    results = run_batch(player, ["swift", "silkworm", ""], dictionary=SetDictionary(WORDS),
                        words=WORDS, seed=3)
    assert [r["root"] for r in results] == ["swift", "silkworm"]
    # longest words come first
    assert results[0]["history"][0][0] in ("wits", "fist")

    s = summarize(results)
    assert s["cases"] == 2
    assert s["words_max"] == max(r["word_count"] for r in results)
    assert set(s["rejections"]) == {"already_used", "not_spellable_from_root",
                                    "not_a_real_word", "too_short", "same_as_root"}

    for r in results:
        r["player_id"] = player.id
    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["player"] == "longest_first"
    assert rows[0]["root"] == "swift"
    assert len(rows[0]["words"].split()) == results[0]["word_count"]

    man = write_manifest({"summary": s}, str(tmp_path / "out" / "m.json"))
    assert json.loads(Path(man).read_text(encoding="utf-8"))["summary"]["cases"] == 2


def test_summarize_empty():
    assert summarize([]) == {"cases": 0}


def test_run_batch_sample():
    player = create_player("random_spellable")
    results = run_batch(player, ["swift", "silkworm"], dictionary=SetDictionary(WORDS),
                        words=WORDS, sample=1)
    assert len(results) == 1


def test_run_batch_reports_each_case():
    seen = []
    player = create_player("random_spellable")
    results = run_batch(player, ["swift", "silkworm"], dictionary=SetDictionary(WORDS),
                        words=WORDS, seed=5,
                        on_case=lambda idx, total, r: seen.append((idx, total, r["root"])))
    assert seen == [(1, 2, "swift"), (2, 2, "silkworm")]
    assert len(results) == 2
