"""Accuracy scoring of a decoded answer against the original phrase."""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Optional

from signal_table import SPECIAL_GROUPS

_WHITESPACE = re.compile(r"\s+")


class ScoringStrategy(str, Enum):
    HYBRID = "hybrid"
    POSITIONAL = "positional"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def decode_special_groups(text: str) -> str:
    """Replace every group code with its symbol, group by group in table order."""
    for group, symbol in SPECIAL_GROUPS.items():
        text = text.replace(group, symbol)
    return text


def normalize_original(original: Optional[str]) -> str:
    return _WHITESPACE.sub("", decode_special_groups((original or "").upper()))


def normalize_answer(answer: Optional[str]) -> str:
    return _WHITESPACE.sub("", (answer or "").upper())


def levenshtein_distance(a: str, b: str) -> int:
    """Unit-cost insert/delete/substitute distance, no transpositions."""
    previous = list(range(len(b) + 1))
    for i in range(1, len(a) + 1):
        current = [i] + [0] * len(b)
        for j in range(1, len(b) + 1):
            if a[i - 1] == b[j - 1]:
                current[j] = previous[j - 1]
            else:
                current[j] = 1 + min(previous[j], current[j - 1], previous[j - 1])
        previous = current
    return previous[len(b)]


def _hybrid(original: str, answer: str) -> int:
    # A contiguous exact fragment scores by coverage, not by edit distance.
    if answer in original:
        return _round_half_up((len(answer) / len(original)) * 100)
    distance = levenshtein_distance(original, answer)
    similarity = 1 - distance / max(len(original), len(answer))
    return _round_half_up(max(0.0, similarity * 100))


def _positional(original: str, answer: str) -> int:
    matches = sum(1 for a, b in zip(original, answer) if a == b)
    return _round_half_up((matches / max(len(original), len(answer))) * 100)


def score(
    original: Optional[str],
    answer: Optional[str],
    strategy: ScoringStrategy = ScoringStrategy.HYBRID,
) -> int:
    """Score ``answer`` against ``original`` as an integer percentage.

    The original side has its symbol groups decoded, the answer side does
    not, so ``score(a, b)`` and ``score(b, a)`` may differ.
    """
    norm_original = normalize_original(original)
    norm_answer = normalize_answer(answer)
    if not norm_original:
        return 100
    if not norm_answer:
        return 0
    if strategy == ScoringStrategy.POSITIONAL:
        return _positional(norm_original, norm_answer)
    return _hybrid(norm_original, norm_answer)
