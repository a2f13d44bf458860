from __future__ import annotations

import string

from models import REST_SIGNAL, Signal, Token
from signal_table import (
    NUMBER_TO_WORD,
    SEMAPHORE_MAP,
    SPECIAL_GROUPS,
    SPECIAL_SYMBOL_DICTIONARY,
    SYMBOL_TO_GROUP,
    WORD_TO_NUMBER,
    lookup,
    lookup_signal,
    number_word,
    search,
    symbol_group,
)


def test_lookup_is_case_insensitive_and_pure() -> None:
    assert lookup("a") == lookup("A") == Signal(0, 1)
    assert lookup("J") == Signal(6, 4)
    assert lookup_signal("q") == lookup_signal("q")


def test_unknown_or_empty_input_is_rest() -> None:
    assert lookup("") == REST_SIGNAL
    assert lookup(None) == REST_SIGNAL
    assert lookup("?") == REST_SIGNAL
    assert lookup("AB") == REST_SIGNAL
    assert lookup(" ") == Signal(0, 0)


def test_lookup_accepts_tokens() -> None:
    assert lookup(Token.indicator()) == Signal(4, 5)
    assert lookup(Token.rest()) == REST_SIGNAL
    assert lookup(Token.letter("Z")) == Signal(3, 7)


def test_digits_alias_letters() -> None:
    for digit, letter in zip("123456789", "ABCDEFGHI"):
        assert lookup(digit) == lookup(letter)
    assert lookup("0") == lookup("K")


def test_positions_in_range() -> None:
    for mapping in SEMAPHORE_MAP:
        assert 0 <= mapping.left <= 7
        assert 0 <= mapping.right <= 7
    assert {m.character for m in SEMAPHORE_MAP} >= set(string.ascii_uppercase)


def test_symbol_groups() -> None:
    assert symbol_group("(") == "KN"
    assert symbol_group("/") == "XE"
    assert symbol_group("A") is None
    assert symbol_group("") is None
    assert SPECIAL_GROUPS["AAA"] == "."
    assert list(SPECIAL_GROUPS) == ["KN", "KK", "AAA", "MIM", "DU", "XE"]
    assert {s.symbol: s.group for s in SPECIAL_SYMBOL_DICTIONARY} == SYMBOL_TO_GROUP


def test_number_words_are_three_letters() -> None:
    assert number_word("5") == "FIV"
    assert sorted(NUMBER_TO_WORD) == list("0123456789")
    for word in NUMBER_TO_WORD.values():
        assert len(word) == 3 and word.isalpha() and word.isupper()
    assert WORD_TO_NUMBER["SVN"] == "7"


def test_search() -> None:
    assert [m.character for m in search("a")] == ["A"]
    assert [m.character for m in search("#")] == ["#"]
    assert sorted(m.character for m in search("number")) == list("0123456789")
    assert search("zz") == []
    everything = search("")
    assert len(everything) == len(SEMAPHORE_MAP) - 1
    assert all(m.character != " " for m in everything)
