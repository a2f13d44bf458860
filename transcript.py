"""Normalize a dictated answer into the text a trainee would have typed.

Spoken commands: ``NUM``/``NUMBER`` opens and closes a number run, ``NEXT``
or ``SPACE`` inserts a space, and the symbol group names (``KN``, ``AAA``...)
stand for their punctuation.
"""

from __future__ import annotations

from signal_table import WORD_TO_NUMBER

SYMBOL_WORDS = {
    "KN": "(",
    "KK": ")",
    "AAA": ".",
    "MIM": ",",
    "DU": "-",
    "XE": "/",
}

PHONETIC_LETTERS = {
    "YOU": "U",
    "ARE": "R",
    "SEE": "C",
    "BE": "B",
    "WHY": "Y",
    "EYE": "I",
    "OH": "O",
    "OKAY": "K",
    "KAY": "K",
    "JAY": "J",
    "AYE": "I",
    "TEA": "T",
    "PEA": "P",
    "QUEUE": "Q",
    "EX": "X",
}

SPOKEN_DIGITS = {
    "ZERO": "0",
    "ONE": "1",
    "TWO": "2",
    "THREE": "3",
    "FOUR": "4",
    "FOR": "4",
    "FIVE": "5",
    "SIX": "6",
    "SEVEN": "7",
    "SVN": "7",
    "EIGHT": "8",
    "ATE": "8",
    "NINE": "9",
}

NUMBER_TOGGLES = ("NUM", "NUMBER")
SPACE_WORDS = ("NEXT", "SPACE")


def _letters_only(word: str) -> str:
    return "".join(c for c in word if "A" <= c <= "Z")


def process_transcript(text: str) -> str:
    words = (text or "").upper().split()
    out: list[str] = []
    in_number_mode = False
    i = 0
    while i < len(words):
        word = words[i]
        i += 1
        if word in NUMBER_TOGGLES:
            in_number_mode = not in_number_mode
        elif in_number_mode and word in SPOKEN_DIGITS:
            out.append(SPOKEN_DIGITS[word])
        elif in_number_mode and word in WORD_TO_NUMBER:
            out.append(WORD_TO_NUMBER[word])
        elif word in PHONETIC_LETTERS:
            out.append(PHONETIC_LETTERS[word])
        elif word == "TRIPLE" and i < len(words) and words[i] == "A":
            out.append(".")
            i += 1
        elif word in SYMBOL_WORDS:
            out.append(SYMBOL_WORDS[word])
        elif word in SPACE_WORDS:
            out.append(" ")
        else:
            out.append(_letters_only(word))
    return "".join(out)
