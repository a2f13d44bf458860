"""Builds training-session records and hands them to a history sink."""

from __future__ import annotations

import secrets
import string
import time
from typing import Callable, Optional

from interfaces import Clock, HistorySink, IdFactory
from models import SessionCategory, TrainingSession
from scorer import score

LONG_PHRASE_WORDS = 10

_ID_ALPHABET = string.digits + string.ascii_lowercase


def now_ms() -> int:
    return int(time.time() * 1000)


def new_session_id() -> str:
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))


def classify(phrase: str) -> SessionCategory:
    if len(phrase.split(" ")) > LONG_PHRASE_WORDS:
        return SessionCategory.LONG
    return SessionCategory.SHORT


def record_session(
    original: str,
    transmitted_text: str,
    user_answer: str,
    delay_ms: int,
    *,
    category: Optional[SessionCategory] = None,
    clock: Clock = now_ms,
    id_factory: IdFactory = new_session_id,
    scorer: Callable[[str, str], int] = score,
    sink: Optional[HistorySink] = None,
) -> TrainingSession:
    """Score an answer and build its session record.

    Values are used as given; a negative delay is stored unchanged. When
    ``sink`` is passed the record is prepended to it.
    """
    session = TrainingSession(
        id=id_factory(),
        timestamp=clock(),
        accuracy=scorer(original, user_answer),
        speed_ms=delay_ms,
        original_phrase=original,
        user_phrase=user_answer.upper(),
        category=category or classify(original),
        transmitted_text=transmitted_text,
    )
    if sink is not None:
        sink.prepend(session)
    return session


class SessionRecorder:
    def __init__(
        self,
        sink: HistorySink,
        clock: Clock = now_ms,
        id_factory: IdFactory = new_session_id,
    ) -> None:
        self._sink = sink
        self._clock = clock
        self._id_factory = id_factory

    @property
    def sink(self) -> HistorySink:
        return self._sink

    def record(
        self,
        original: str,
        transmitted_text: str,
        user_answer: str,
        delay_ms: int,
        category: Optional[SessionCategory] = None,
    ) -> TrainingSession:
        return record_session(
            original,
            transmitted_text,
            user_answer,
            delay_ms,
            category=category,
            clock=self._clock,
            id_factory=self._id_factory,
            sink=self._sink,
        )
