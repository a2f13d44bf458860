"""Core data models for the trainer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List


@dataclass(frozen=True)
class Signal:
    """Left and right arm positions, 0 (down) stepping 45 degrees clockwise."""

    left: int
    right: int


REST_SIGNAL = Signal(0, 0)


@dataclass(frozen=True)
class SignalMapping:
    character: str
    left: int
    right: int
    description: str = ""

    @property
    def signal(self) -> Signal:
        return Signal(self.left, self.right)


class TokenKind(str, Enum):
    LETTER = "letter"
    NUMERIC_INDICATOR = "numeric_indicator"
    REST = "rest"


NUMERIC_INDICATOR_CHAR = "#"
REST_CHAR = " "


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    char: str

    @classmethod
    def letter(cls, char: str) -> "Token":
        return cls(TokenKind.LETTER, char)

    @classmethod
    def indicator(cls) -> "Token":
        return cls(TokenKind.NUMERIC_INDICATOR, NUMERIC_INDICATOR_CHAR)

    @classmethod
    def rest(cls) -> "Token":
        return cls(TokenKind.REST, REST_CHAR)


TransmissionQueue = List[Token]


class SessionCategory(str, Enum):
    SHORT = "Short"
    LONG = "Long"
    CUSTOM = "Custom"


class PracticeKind(str, Enum):
    SHORT = "short"
    LONG = "long"
    DRILL = "drill"


class PlaybackState(str, Enum):
    IDLE = "IDLE"
    PLAYING = "PLAYING"
    FINISHED = "FINISHED"


@dataclass(frozen=True)
class TrainingSession:
    id: str
    timestamp: int
    accuracy: int
    speed_ms: int
    original_phrase: str
    user_phrase: str
    category: SessionCategory
    transmitted_text: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.timestamp,
            "accuracy": self.accuracy,
            "speedMs": self.speed_ms,
            "phrase": self.original_phrase,
            "userPhrase": self.user_phrase,
            "type": self.category.value,
            "transmitted": self.transmitted_text,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TrainingSession":
        """Rebuild a session from ``to_dict`` output.

        Raises ``KeyError``/``ValueError``/``TypeError`` for malformed records;
        stores decide how to treat those.
        """
        return cls(
            id=str(data["id"]),
            timestamp=int(data["date"]),
            accuracy=int(data["accuracy"]),
            speed_ms=int(data["speedMs"]),
            original_phrase=str(data["phrase"]),
            user_phrase=str(data["userPhrase"]),
            category=SessionCategory(data["type"]),
            transmitted_text=str(data.get("transmitted", "")),
        )


@dataclass
class HistorySummary:
    count: int = 0
    average_accuracy: float = 0.0
    total_characters: int = 0
    average_speed_ms: float = 0.0
