import pytest
from packages.dictionary import SetDictionary
from packages.engine import can_spell
from packages.harness import run_case
from packages.players import create_player, get_player_ids

WORDS = ["fit", "wit", "sit", "its", "wits", "fist", "swift"]


def test_registry():
    assert get_player_ids() == ["letter_shuffle", "longest_first", "random_spellable"]
    with pytest.raises(ValueError):
        create_player("oracle")


def test_players_return_empty_when_exhausted():
    for pid in ("random_spellable", "longest_first"):
        p = create_player(pid)
        p.reset(words=WORDS, seed=1)
        assert p.next_word({"root": "swift", "used": [], "candidates": [], "rng": p.rng}) == ""


def test_longest_first_picks_longest():
    p = create_player("longest_first")
    p.reset(words=WORDS, seed=1)
    state = {"root": "swift", "used": [], "candidates": ["fit", "wits", "its"], "rng": p.rng}
    assert p.next_word(state) == "wits"


def test_letter_shuffle_uses_root_letters():
    p = create_player("letter_shuffle")
    p.reset(words=WORDS, seed=5)
    for _ in range(50):
        w = p.next_word({"root": "swift", "used": ["fit"], "candidates": [], "rng": p.rng})
        assert can_spell(w, "swift")


def test_letter_shuffle_exercises_rejections():
    p = create_player("letter_shuffle")
    r = run_case(p, "swift", dictionary=SetDictionary(WORDS), words=WORDS,
                 max_turns=200, seed=11)
    assert len(r["history"]) == 200
    assert sum(r["rejections"].values()) + r["word_count"] == 200
    assert r["rejections"].get("not_a_real_word", 0) > 0


def test_seeded_runs_are_reproducible():
    a = run_case(create_player("random_spellable"), "swift", dictionary=SetDictionary(WORDS),
                 words=WORDS, seed=9)
    b = run_case(create_player("random_spellable"), "swift", dictionary=SetDictionary(WORDS),
                 words=WORDS, seed=9)
    assert a["history"] == b["history"]
