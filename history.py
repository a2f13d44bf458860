"""Bounded, most-recent-first training history stores."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

from errors import ERROR_MESSAGES, HISTORY_CORRUPT, HISTORY_WRITE_FAILED
from interfaces import ErrorCallback
from models import TrainingSession

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50


class InMemoryHistory:
    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        self._limit = limit
        self._sessions: List[TrainingSession] = []

    def prepend(self, session: TrainingSession) -> None:
        self._sessions = [session, *self._sessions][: self._limit]

    def sessions(self) -> List[TrainingSession]:
        return list(self._sessions)

    def clear(self) -> None:
        self._sessions = []


class JsonHistoryStore:
    """History persisted as a JSON list of session dicts."""

    def __init__(
        self,
        path: Path | None = None,
        limit: int = DEFAULT_HISTORY_LIMIT,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        self._path = path or Path.home() / ".config" / "semaphore_trainer" / "history.json"
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._limit = limit
        self._on_error = on_error

    def prepend(self, session: TrainingSession) -> None:
        updated = [session, *self.sessions()][: self._limit]
        self._write_all(updated)

    def sessions(self) -> List[TrainingSession]:
        sessions: List[TrainingSession] = []
        for record in self._read_all():
            try:
                sessions.append(TrainingSession.from_dict(record))
            except (KeyError, TypeError, ValueError) as exc:
                self._emit_error(HISTORY_CORRUPT, f"skipped record: {exc!r}")
        return sessions

    def clear(self) -> None:
        self._write_all([])

    def _read_all(self) -> list:
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            self._emit_error(HISTORY_CORRUPT, str(exc))
            return []
        if not isinstance(data, list):
            self._emit_error(HISTORY_CORRUPT, "history is not a list")
            return []
        return [record for record in data if isinstance(record, dict)]

    def _write_all(self, sessions: List[TrainingSession]) -> None:
        payload = [session.to_dict() for session in sessions]
        try:
            self._path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as exc:
            self._emit_error(HISTORY_WRITE_FAILED, str(exc))

    def _emit_error(self, code: str, message: str) -> None:
        logger.warning("%s: %s (%s)", code, ERROR_MESSAGES[code], message)
        if self._on_error:
            self._on_error(code, message)
