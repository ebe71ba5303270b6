"""
Card model for the split simulator.
Handles card creation, token parsing, and building the remaining-card pool.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from .errors import InvalidHandError


class Suit(Enum):
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"


RANKS = ["2", "3", "4", "5", "6", "7", "8", "9", "T", "J", "Q", "K", "A"]
RANK_ORDER = {rank: i + 2 for i, rank in enumerate(RANKS)}  # 2..14, ace high
RANK_ALIASES = {"10": "T"}


@dataclass(frozen=True)
class Card:
    rank: str
    suit: Suit

    @property
    def value(self) -> int:
        """Numeric strength, 2 through 14."""
        return RANK_ORDER[self.rank]

    @classmethod
    def from_token(cls, token: str) -> "Card":
        """Parse a token such as "TH" or "10h"."""
        if not isinstance(token, str) or len(token.strip()) < 2:
            raise InvalidHandError(f"Malformed card token: {token!r}")
        text = token.strip().upper()
        rank, suit_code = text[:-1], text[-1]
        rank = RANK_ALIASES.get(rank, rank)
        if rank not in RANK_ORDER:
            raise InvalidHandError(f"Unknown rank in card token: {token!r}")
        try:
            suit = Suit(suit_code)
        except ValueError:
            raise InvalidHandError(f"Unknown suit in card token: {token!r}") from None
        return cls(rank=rank, suit=suit)

    def __str__(self) -> str:
        return f"{self.rank}{self.suit.value}"

    def __repr__(self) -> str:
        return self.__str__()


def parse_cards(tokens: Iterable) -> list[Card]:
    """Parse tokens (or pass Card objects through), rejecting duplicates."""
    cards = [t if isinstance(t, Card) else Card.from_token(t) for t in tokens]
    seen = set()
    for card in cards:
        if card in seen:
            raise InvalidHandError(f"Duplicate card: {card}")
        seen.add(card)
    return cards


def format_cards(cards: Iterable[Card]) -> list[str]:
    return [str(c) for c in cards]


@dataclass
class Deck:
    cards: list[Card] = field(default_factory=list)

    @classmethod
    def standard_52(cls) -> "Deck":
        """Create a standard 52-card deck."""
        cards = []
        for rank in RANKS:
            for suit in Suit:
                cards.append(Card(rank=rank, suit=suit))
        return cls(cards=cards)

    def remaining(self, held: Iterable[Card]) -> list[Card]:
        """Cards of this deck not in `held`, in deck order."""
        held_set = set(held)
        return [c for c in self.cards if c not in held_set]


def remaining_pool(held: Iterable[Card]) -> list[Card]:
    """The opposing pool: a fresh 52-card deck minus the held cards."""
    return Deck.standard_52().remaining(held)
