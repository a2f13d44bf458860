"""Phrase to transmission-queue transcoding.

Digits are sent inside a numeric run: an opening indicator and rest, the
spelled-out number words separated by rests, and a closing rest and
indicator. Punctuation is sent as its letter group and always outside a
numeric run. The run is tracked by a two-state machine whose transitions
are listed in ``TRANSITIONS``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from models import Token, TransmissionQueue
from signal_table import NUMBER_TO_WORD, SYMBOL_TO_GROUP


class NumberMode(str, Enum):
    LITERAL = "literal"
    NUMERIC = "numeric"


class CharClass(str, Enum):
    SYMBOL = "symbol"
    DIGIT = "digit"
    SPACE = "space"
    LETTER = "letter"
    OTHER = "other"
    END = "end"


OPEN_NUMERIC: tuple[Token, ...] = (Token.indicator(), Token.rest())
CLOSE_NUMERIC: tuple[Token, ...] = (Token.rest(), Token.indicator())

# (mode, class) -> (tokens emitted before the character itself, next mode)
TRANSITIONS: dict[tuple[NumberMode, CharClass], tuple[tuple[Token, ...], NumberMode]] = {
    (NumberMode.LITERAL, CharClass.SYMBOL): ((), NumberMode.LITERAL),
    (NumberMode.NUMERIC, CharClass.SYMBOL): (CLOSE_NUMERIC, NumberMode.LITERAL),
    (NumberMode.LITERAL, CharClass.DIGIT): (OPEN_NUMERIC, NumberMode.NUMERIC),
    (NumberMode.NUMERIC, CharClass.DIGIT): ((), NumberMode.NUMERIC),
    (NumberMode.LITERAL, CharClass.SPACE): ((), NumberMode.LITERAL),
    (NumberMode.NUMERIC, CharClass.SPACE): (CLOSE_NUMERIC, NumberMode.LITERAL),
    (NumberMode.LITERAL, CharClass.LETTER): ((), NumberMode.LITERAL),
    (NumberMode.NUMERIC, CharClass.LETTER): (CLOSE_NUMERIC, NumberMode.LITERAL),
    (NumberMode.LITERAL, CharClass.OTHER): ((), NumberMode.LITERAL),
    (NumberMode.NUMERIC, CharClass.OTHER): ((), NumberMode.NUMERIC),
    (NumberMode.LITERAL, CharClass.END): ((), NumberMode.LITERAL),
    (NumberMode.NUMERIC, CharClass.END): (CLOSE_NUMERIC, NumberMode.LITERAL),
}


def _is_digit(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"


def classify(char: str) -> CharClass:
    """Classify one already-uppercased character."""
    if char in SYMBOL_TO_GROUP:
        return CharClass.SYMBOL
    if _is_digit(char):
        return CharClass.DIGIT
    if char == " ":
        return CharClass.SPACE
    if len(char) == 1 and "A" <= char <= "Z":
        return CharClass.LETTER
    return CharClass.OTHER


def step(mode: NumberMode, char_class: CharClass) -> tuple[tuple[Token, ...], NumberMode]:
    return TRANSITIONS[(mode, char_class)]


def _body(char: str, char_class: CharClass, next_char: str) -> list[Token]:
    if char_class == CharClass.SYMBOL:
        return [Token.letter(c) for c in SYMBOL_TO_GROUP[char]]
    if char_class == CharClass.DIGIT:
        tokens = [Token.letter(c) for c in NUMBER_TO_WORD[char]]
        if _is_digit(next_char):
            tokens.append(Token.rest())
        return tokens
    if char_class == CharClass.SPACE:
        return [Token.rest()]
    if char_class == CharClass.LETTER:
        return [Token.letter(char)]
    return []


def encode(phrase: Optional[str]) -> TransmissionQueue:
    """Build the transmission queue for ``phrase``.

    Unsupported characters are dropped. Empty or ``None`` input gives an
    empty queue.
    """
    if not phrase:
        return []
    queue: TransmissionQueue = []
    mode = NumberMode.LITERAL
    for i, raw in enumerate(phrase):
        char = raw.upper()
        char_class = classify(char)
        prefix, mode = step(mode, char_class)
        queue.extend(prefix)
        next_char = phrase[i + 1] if i + 1 < len(phrase) else ""
        queue.extend(_body(char, char_class, next_char))
    closing, _ = step(mode, CharClass.END)
    queue.extend(closing)
    return queue


def transmitted_text(queue: TransmissionQueue) -> str:
    """Flatten a queue to the characters it transmits."""
    return "".join(token.char for token in queue)
