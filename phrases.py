"""Practice material: sample words, naval phrases and drill generation."""

from __future__ import annotations

import random
from typing import Optional

from models import PracticeKind

SAMPLE_WORDS = (
    "EXECUTE", "COASTAL", "SURVEILLANCE", "DRILL", "REDEPLOYMENT", "SECTOR", "ALPHA", "BRAVO",
    "CHARLIE", "DELTA", "MAINTENANCE", "SIGNAL", "EQUIPMENT", "PROCEED", "RENDEZVOUS", "RADIO",
    "SILENCE", "WEATHER", "ANOMALY", "PATROL", "EMERGENCY", "EVACUATION", "POSITION", "LATITUDE",
    "LONGITUDE", "BEARING", "DISTANCE", "TARGET", "NEUTRALIZE", "IDENTIFIED", "VESSEL", "CARRIER",
    "FRIGATE", "DESTROYER", "SUBMARINE", "BATTLESHIP", "AMPHIBIOUS", "OPERATION", "OVERWATCH",
    "SECURITY", "PROTOCOL", "ZULU", "TANGO", "SIERRA", "WHISKEY", "KILO", "FOXTROT",
)

SAMPLE_NAVAL_PHRASES = (
    "UNIT 5 READY",
    "BASE 7 CLEAR",
    "SECTOR 3 PATROL",
    "SHIP 21 ARRIVING",
    "EXECUTE JOINT COASTAL SURVEILLANCE DRILL",
    "IMMEDIATE REDEPLOYMENT TO SECTOR ALPHA 101",
    "COMMENCE MAINTENANCE CHECKS ON SIGNAL EQUIPMENT 45",
    "PROCEED TO RENDEZVOUS POINT CHARLIE 789",
    "MAINTAIN RADIO SILENCE UNTIL FURTHER ORDERS 00",
    "WEATHER ANOMALY REPORTED OVER PATROL ROUTE 12",
    "EMERGENCY EVACUATION DRILL BEGINS AT 0800 HOURS",
)

SHORT_PHRASE_MAX_WORDS = 5
DRILL_WORDS = 40
DRILL_DIGITS = 40


def _word_count(phrase: str) -> int:
    return len(phrase.split(" "))


def generate_drill(rng: Optional[random.Random] = None) -> str:
    rng = rng or random.Random()
    words = [rng.choice(SAMPLE_WORDS) for _ in range(DRILL_WORDS)]
    digits = [str(rng.randrange(10)) for _ in range(DRILL_DIGITS)]
    return " ".join(words) + " " + "".join(digits)


def pick_phrase(kind: PracticeKind, rng: Optional[random.Random] = None) -> str:
    rng = rng or random.Random()
    if kind == PracticeKind.DRILL:
        return generate_drill(rng)
    if kind == PracticeKind.SHORT:
        pool = [p for p in SAMPLE_NAVAL_PHRASES if _word_count(p) <= SHORT_PHRASE_MAX_WORDS]
    else:
        pool = [p for p in SAMPLE_NAVAL_PHRASES if _word_count(p) > SHORT_PHRASE_MAX_WORDS]
    if not pool:
        return SAMPLE_NAVAL_PHRASES[0]
    return rng.choice(pool)
