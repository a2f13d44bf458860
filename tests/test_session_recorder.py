from __future__ import annotations

import itertools

from history import InMemoryHistory
from models import SessionCategory, TrainingSession
from session_recorder import SessionRecorder, classify, new_session_id, record_session
from transcoder import encode, transmitted_text


def _fixed_clock() -> int:
    return 1_700_000_000_000


def _counter_ids():  # noqa: ANN202
    counter = itertools.count(1)
    return lambda: f"s{next(counter)}"


def test_record_session_builds_record() -> None:
    phrase = "UNIT 5 READY"
    sent = transmitted_text(encode(phrase))
    session = record_session(
        phrase, sent, "unit 5 ready", 1050, clock=_fixed_clock, id_factory=lambda: "abc"
    )

    assert session == TrainingSession(
        id="abc",
        timestamp=1_700_000_000_000,
        accuracy=100,
        speed_ms=1050,
        original_phrase=phrase,
        user_phrase="UNIT 5 READY",
        category=SessionCategory.SHORT,
        transmitted_text="UNIT # FIV # READY",
    )


def test_record_session_prepends_to_sink() -> None:
    sink = InMemoryHistory()
    session = record_session("A", "A", "A", 500, sink=sink)
    assert sink.sessions() == [session]


def test_values_are_used_as_given() -> None:
    session = record_session("HELLO", "HELLO", "", -5)
    assert session.speed_ms == -5
    assert session.accuracy == 0


def test_category_override() -> None:
    session = record_session("HELLO", "HELLO", "HELLO", 100, category=SessionCategory.CUSTOM)
    assert session.category == SessionCategory.CUSTOM


def test_classify_by_word_count() -> None:
    assert classify(" ".join(["W"] * 10)) == SessionCategory.SHORT
    assert classify(" ".join(["W"] * 11)) == SessionCategory.LONG
    assert classify("") == SessionCategory.SHORT


def test_new_session_id_shape() -> None:
    ids = {new_session_id() for _ in range(20)}
    assert len(ids) == 20
    for value in ids:
        assert len(value) == 9
        assert value.isalnum() and value == value.lower()


def test_recorder_keeps_fifty_most_recent() -> None:
    sink = InMemoryHistory(limit=50)
    recorder = SessionRecorder(sink, clock=_fixed_clock, id_factory=_counter_ids())

    for _ in range(51):
        recorder.record("ALPHA", "ALPHA", "ALPHA", 300)

    sessions = sink.sessions()
    assert len(sessions) == 50
    assert sessions[0].id == "s51"
    assert sessions[-1].id == "s2"
    assert all(s.id != "s1" for s in sessions)
