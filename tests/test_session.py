import pytest
from packages.dictionary import SetDictionary
from packages.engine import (DEFAULT_ROOT_WORD, GameSession, Outcome, Reason, ScoreState,
                             SessionNotStarted, SessionState)

WORDS = ["fit", "wit", "sit", "its", "is", "swift", "fist", "wits"]


@pytest.fixture
def session():
    s = GameSession(SetDictionary(WORDS), seed=1)
    s.start(["swift"])
    return s


def test_new_session_is_uninitialized():
    s = GameSession(SetDictionary(WORDS))
    assert s.state is SessionState.UNINITIALIZED
    with pytest.raises(SessionNotStarted):
        s.submit("fit")
    with pytest.raises(SessionNotStarted):
        s.restart()


def test_start_activates(session):
    assert session.state is SessionState.ACTIVE
    assert session.root_word == "swift"
    assert session.used_words == ()
    assert session.score == ScoreState(0, 0, 0.0)


def test_start_picks_from_list():
    s = GameSession(SetDictionary(WORDS), seed=7)
    pool = ["swift", "silkworm", "absolute"]
    for _ in range(20):
        assert s.start(pool) in pool


def test_start_normalizes_and_skips_blanks():
    s = GameSession(SetDictionary(WORDS))
    assert s.start(["", "  SWIFT \r", "   "]) == "swift"
    assert s.word_list == ("swift",)


def test_start_empty_list_falls_back():
    s = GameSession(SetDictionary(WORDS))
    assert s.start([]) == DEFAULT_ROOT_WORD
    assert s.state is SessionState.ACTIVE


def test_start_without_list_is_fatal():
    s = GameSession(SetDictionary(WORDS))
    with pytest.raises(ValueError):
        s.start(None)
    assert s.state is SessionState.UNINITIALIZED


def test_swift_fit_example(session):
    assert session.submit("fit").accepted
    assert session.score == ScoreState(word_count=1, letter_count=3, average_length=3.0)
    assert session.used_words == ("fit",)


def test_submit_normalizes(session):
    assert session.submit("  FiT\n").accepted
    assert session.used_words == ("fit",)


def test_empty_submission_is_silent(session):
    assert session.submit("   ") == Outcome.reject(Reason.EMPTY)
    assert session.used_words == ()
    assert session.score.word_count == 0


def test_duplicate_submission(session):
    assert session.submit("fit").accepted
    assert session.submit("fit").reason is Reason.ALREADY_USED
    assert session.submit(" FIT").reason is Reason.ALREADY_USED
    assert session.used_words == ("fit",)


def test_root_word_rejected(session):
    assert session.submit("swift").reason is Reason.SAME_AS_ROOT


def test_double_letter_rejected(session):
    assert session.submit("swiftt").reason is Reason.NOT_SPELLABLE_FROM_ROOT


def test_rejections_leave_state_alone(session):
    session.submit("fit")
    before = (session.used_words, session.score)
    for w in ["fit", "swiftt", "wist", "is", "swift"]:
        assert not session.submit(w).accepted
    assert (session.used_words, session.score) == before


def test_history_most_recent_first_and_score(session):
    played = ["fit", "wits", "its", "fist"]
    for w in played:
        assert session.submit(w).accepted
    assert session.used_words == tuple(reversed(played))
    score = session.score
    assert score.word_count == len(played)
    assert score.letter_count == sum(len(w) for w in played)
    assert score.average_length == pytest.approx(score.letter_count / len(played))


def test_restart_clears_state(session):
    session.play(["fit", "wits", "its"])
    session.restart()
    assert session.used_words == ()
    assert session.score == ScoreState(0, 0, 0.0)
    assert session.root_word == "swift"
    assert session.state is SessionState.ACTIVE


def test_restart_reuses_loaded_list():
    s = GameSession(SetDictionary(WORDS), seed=3)
    s.start(["swift", "silkworm"])
    for _ in range(10):
        assert s.restart() in ("swift", "silkworm")
    assert s.word_list == ("swift", "silkworm")


def test_subscribers_notified_on_changes(session):
    seen = []
    session.subscribe(lambda s: seen.append((s.root_word, s.used_words)))
    session.submit("fit")
    session.submit("zzz")       # rejected: no notification
    session.restart()
    assert seen == [("swift", ("fit",)), ("swift", ())]


def test_unsubscribe(session):
    calls = []
    listener = calls.append
    session.subscribe(listener)
    session.unsubscribe(listener)
    session.submit("fit")
    assert calls == []


def test_sessions_are_independent():
    d = SetDictionary(WORDS)
    a = GameSession(d)
    b = GameSession(d)
    a.start(["swift"])
    b.start(["swift"])
    a.submit("fit")
    assert b.used_words == ()
    assert b.submit("fit").accepted


def test_custom_min_length():
    s = GameSession(SetDictionary(WORDS), min_length=2)
    s.start(["swift"])
    assert s.submit("is").accepted
