"""Aggregate figures over the training history."""

from __future__ import annotations

from typing import Sequence

from models import HistorySummary, TrainingSession

RECENT_WINDOW = 5


def summarize(history: Sequence[TrainingSession]) -> HistorySummary:
    if not history:
        return HistorySummary()
    count = len(history)
    return HistorySummary(
        count=count,
        average_accuracy=sum(s.accuracy for s in history) / count,
        total_characters=sum(len(s.original_phrase) for s in history),
        average_speed_ms=sum(s.speed_ms for s in history) / count,
    )


def rank(history: Sequence[TrainingSession]) -> str:
    """Rank from the most recent sessions; ``history`` is most-recent-first."""
    if not history:
        return "Beginner"
    recent = history[:RECENT_WINDOW]
    avg_accuracy = sum(s.accuracy for s in recent) / len(recent)
    avg_speed = sum(s.speed_ms for s in recent) / len(recent)

    if avg_accuracy >= 95 and avg_speed <= 400 and len(history) > 20:
        return "AINSC Winner"
    if avg_accuracy >= 90 and avg_speed <= 700 and len(history) > 10:
        return "PreNSC Winner"
    if avg_accuracy >= 75:
        return "InterGroup Winner"
    return "Beginner Cadet"
