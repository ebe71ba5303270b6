from collections import Counter

import pytest

from chinese_poker_sim.engine.deck import (Card, Deck, Suit, RANKS, format_cards, parse_cards,
                                           remaining_pool)
from chinese_poker_sim.engine.errors import InvalidHandError, InvalidInputError

HAND = "AH KD QC JS 9H 8D 7C 6S 4H 4D 3C 2S 2H".split()


def test_standard_deck_has_52_distinct_cards():
    deck = Deck.standard_52()
    assert len(deck.cards) == 52
    assert len(set(deck.cards)) == 52
    assert Counter(c.suit for c in deck.cards) == {suit: 13 for suit in Suit}
    assert Counter(c.rank for c in deck.cards) == {rank: 4 for rank in RANKS}


def test_rank_values_are_ace_high():
    assert Card("2", Suit.CLUBS).value == 2
    assert Card("T", Suit.CLUBS).value == 10
    assert Card("A", Suit.CLUBS).value == 14


def test_remaining_pool_excludes_held_cards():
    held = parse_cards(HAND)
    pool = remaining_pool(held)
    assert len(pool) == 39
    assert not set(pool) & set(held)
    assert set(pool) | set(held) == set(Deck.standard_52().cards)


def test_cards_compare_by_rank_and_suit():
    assert Card("T", Suit.HEARTS) == Card.from_token("TH")
    assert Card("T", Suit.HEARTS) != Card("T", Suit.SPADES)
    assert len({Card("T", Suit.HEARTS), Card.from_token("th")}) == 1


@pytest.mark.parametrize("token, expected", [
    ("TH", "TH"),
    ("th", "TH"),
    ("10h", "TH"),
    (" 2c ", "2C"),
    ("AS", "AS"),
])
def test_token_parsing(token, expected):
    assert str(Card.from_token(token)) == expected


@pytest.mark.parametrize("token", ["", "A", "1H", "AX", "11S", "KHH", None, 12])
def test_malformed_tokens_are_rejected(token):
    with pytest.raises(InvalidHandError):
        Card.from_token(token)


def test_duplicate_cards_are_rejected():
    with pytest.raises(InvalidHandError, match="Duplicate"):
        parse_cards(["AH", "KD", "ah"])


def test_invalid_hand_is_a_value_error():
    assert issubclass(InvalidHandError, InvalidInputError)
    assert issubclass(InvalidHandError, ValueError)


def test_parse_passes_cards_through_and_formats_back():
    card = Card("Q", Suit.DIAMONDS)
    assert parse_cards([card, "2S"]) == [card, Card("2", Suit.SPADES)]
    assert format_cards(parse_cards(HAND)) == HAND
