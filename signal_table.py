"""Static semaphore tables: character signals, symbol groups and number words.

Positions run clockwise from the bottom:

    0: South (6 o'clock)     4: North (12 o'clock)
    1: South-West (7:30)     5: North-East (1:30)
    2: West (9 o'clock)      6: East (3 o'clock)
    3: North-West (10:30)    7: South-East (4:30)

Every lookup here is total: unknown characters resolve to the rest signal
or to ``None``, never to an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from models import (
    NUMERIC_INDICATOR_CHAR,
    REST_CHAR,
    Signal,
    SignalMapping,
    Token,
)

SEMAPHORE_MAP: tuple[SignalMapping, ...] = (
    SignalMapping("A", 0, 1),
    SignalMapping("B", 0, 2),
    SignalMapping("C", 0, 3),
    SignalMapping("D", 0, 4),
    SignalMapping("E", 5, 0),
    SignalMapping("F", 6, 0),
    SignalMapping("G", 7, 0),
    SignalMapping("H", 1, 2),
    SignalMapping("I", 1, 3),
    SignalMapping("J", 6, 4),
    SignalMapping("K", 1, 4),
    SignalMapping("L", 1, 5),
    SignalMapping("M", 1, 6),
    SignalMapping("N", 1, 7),
    SignalMapping("O", 2, 3),
    SignalMapping("P", 2, 4),
    SignalMapping("Q", 2, 5),
    SignalMapping("R", 2, 6),
    SignalMapping("S", 2, 7),
    SignalMapping("T", 3, 4),
    SignalMapping("U", 3, 5),
    SignalMapping("V", 6, 5),
    SignalMapping("W", 5, 6),
    SignalMapping("X", 5, 7),
    SignalMapping("Y", 3, 6),
    SignalMapping("Z", 3, 7),
    SignalMapping(REST_CHAR, 0, 0, "Rest"),
    SignalMapping(NUMERIC_INDICATOR_CHAR, 4, 5, "Numeric indicator"),
    # Digits reuse letter signals: 1-9 as A-I, 0 as K.
    SignalMapping("1", 0, 1, "A"),
    SignalMapping("2", 0, 2, "B"),
    SignalMapping("3", 0, 3, "C"),
    SignalMapping("4", 0, 4, "D"),
    SignalMapping("5", 5, 0, "E"),
    SignalMapping("6", 6, 0, "F"),
    SignalMapping("7", 7, 0, "G"),
    SignalMapping("8", 1, 2, "H"),
    SignalMapping("9", 1, 3, "I"),
    SignalMapping("0", 1, 4, "K"),
)

_BY_CHAR = {m.character: m for m in SEMAPHORE_MAP}

# Insertion order is the order groups are decoded back into symbols.
SYMBOL_TO_GROUP: dict[str, str] = {
    "(": "KN",
    ")": "KK",
    ".": "AAA",
    ",": "MIM",
    "-": "DU",
    "/": "XE",
}

SPECIAL_GROUPS: dict[str, str] = {group: symbol for symbol, group in SYMBOL_TO_GROUP.items()}

NUMBER_TO_WORD: dict[str, str] = {
    "0": "ZRO",
    "1": "ONE",
    "2": "TWO",
    "3": "THR",
    "4": "FOR",
    "5": "FIV",
    "6": "SIX",
    "7": "SVN",
    "8": "ATE",
    "9": "NIN",
}

WORD_TO_NUMBER: dict[str, str] = {word: digit for digit, word in NUMBER_TO_WORD.items()}


@dataclass(frozen=True)
class SpecialSymbol:
    symbol: str
    group: str
    name: str


SPECIAL_SYMBOL_DICTIONARY: tuple[SpecialSymbol, ...] = (
    SpecialSymbol("(", "KN", "Open bracket"),
    SpecialSymbol(")", "KK", "Close bracket"),
    SpecialSymbol(".", "AAA", "Full stop"),
    SpecialSymbol(",", "MIM", "Comma"),
    SpecialSymbol("-", "DU", "Hyphen"),
    SpecialSymbol("/", "XE", "Slash"),
)


def lookup(char: Union[str, Token, None]) -> Signal:
    """Return the signal for a character or token, rest for anything unknown."""
    return lookup_mapping(char).signal


lookup_signal = lookup


def lookup_mapping(char: Union[str, Token, None]) -> SignalMapping:
    if isinstance(char, Token):
        char = char.char
    if not char:
        return _BY_CHAR[REST_CHAR]
    return _BY_CHAR.get(char.upper(), _BY_CHAR[REST_CHAR])


def symbol_group(char: Optional[str]) -> Optional[str]:
    """Group code standing in for a punctuation symbol, or None."""
    if not char:
        return None
    return SYMBOL_TO_GROUP.get(char)


def number_word(digit: str) -> str:
    return NUMBER_TO_WORD[digit]


def search(query: str) -> list[SignalMapping]:
    """Dictionary search over every mapping except the rest position."""
    needle = (query or "").lower()
    return [
        m
        for m in SEMAPHORE_MAP
        if m.character != REST_CHAR
        and (needle in m.character.lower() or (needle == "number" and m.character.isdigit()))
    ]
