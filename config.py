"""Simple JSON-based preferences store."""

from __future__ import annotations

import json
from pathlib import Path

DEFAULT_SPEED_LEVEL = 50


def clamp_level(level: int) -> int:
    return max(0, min(100, int(level)))


class JsonPreferencesStore:
    def __init__(self, path: Path | None = None) -> None:
        self._path = path or Path.home() / ".config" / "semaphore_trainer" / "config.json"
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def get_guide_seen(self) -> bool:
        data = self._read_all()
        return bool(data.get("guide_seen", False))

    def set_guide_seen(self, seen: bool) -> None:
        data = self._read_all()
        data["guide_seen"] = bool(seen)
        self._write_all(data)

    def get_speed_level(self) -> int:
        data = self._read_all()
        try:
            return clamp_level(data.get("speed_level", DEFAULT_SPEED_LEVEL))
        except (TypeError, ValueError):
            return DEFAULT_SPEED_LEVEL

    def set_speed_level(self, level: int) -> None:
        data = self._read_all()
        data["speed_level"] = clamp_level(level)
        self._write_all(data)

    def _read_all(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, data: dict) -> None:
        self._path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
