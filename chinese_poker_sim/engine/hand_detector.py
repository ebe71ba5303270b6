"""
Hand evaluation for the split simulator.
Scores 3-card and 5-card rows to a single comparable integer.
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from .deck import Card

WHEEL = (14, 2, 3, 4, 5)
CATEGORY_BASE = 1000


class HandType(Enum):
    """Poker hand types, ordered by base strength."""
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


def make_score(hand_type: HandType, tiebreak: int) -> int:
    """Category in the leading digit, top relevant rank in the trailing ones."""
    return hand_type.value * CATEGORY_BASE + tiebreak


def split_score(score: int) -> tuple[HandType, int]:
    """Inverse of make_score."""
    return HandType(score // CATEGORY_BASE), score % CATEGORY_BASE


def straight_high(values: Iterable[int]) -> Optional[int]:
    """
    Top card of the highest straight among the ranks, or None.

    Works on any number of ranks (a 13-card suit group included); the
    wheel A-2-3-4-5 reports 5 here. Row scoring ranks a straight by its
    highest card instead, so a scored wheel ties broadway.
    """
    ranks = sorted(set(values))
    best = None
    for i in range(len(ranks) - 4):
        if ranks[i + 4] - ranks[i] == 4:
            best = ranks[i + 4]
    if best is None and all(r in ranks for r in WHEEL):
        best = 5
    return best


def is_straight(values: Iterable[int]) -> bool:
    return straight_high(values) is not None


@dataclass
class DetectedHand:
    """Result of hand detection."""
    hand_type: HandType
    tiebreak: int
    cards: list[Card]

    @property
    def score(self) -> int:
        return make_score(self.hand_type, self.tiebreak)

    def __str__(self) -> str:
        return f"{self.hand_type.label} ({' '.join(str(c) for c in self.cards)})"


def _detect_three(values: list[int]) -> tuple[HandType, int]:
    counts = Counter(values)
    rank, count = max(counts.items(), key=lambda kv: (kv[1], kv[0]))
    if count == 3:
        return HandType.THREE_OF_A_KIND, rank
    if count == 2:
        return HandType.PAIR, rank
    return HandType.HIGH_CARD, max(values)


def _detect_five(values: list[int], suits: list) -> tuple[HandType, int]:
    counts = Counter(values)
    # Ranks ordered by (count, rank) descending: the "relevant" rank comes first
    grouped = sorted(counts.items(), key=lambda kv: (kv[1], kv[0]), reverse=True)
    shape = [count for _, count in grouped]
    lead = grouped[0][0]

    is_flush = len(set(suits)) == 1
    # A straight scores by its highest card, the ace for a wheel
    high = max(values) if len(counts) == 5 and is_straight(values) else None

    if is_flush and high is not None:
        return HandType.STRAIGHT_FLUSH, high
    if shape[0] == 4:
        return HandType.FOUR_OF_A_KIND, lead
    if shape[:2] == [3, 2]:
        return HandType.FULL_HOUSE, lead
    if is_flush:
        return HandType.FLUSH, max(values)
    if high is not None:
        return HandType.STRAIGHT, high
    if shape[0] == 3:
        return HandType.THREE_OF_A_KIND, lead
    if shape[:2] == [2, 2]:
        return HandType.TWO_PAIR, lead
    if shape[0] == 2:
        return HandType.PAIR, lead
    return HandType.HIGH_CARD, max(values)


def detect_hand(cards) -> DetectedHand:
    """Detect the hand type of a 3-card or 5-card row."""
    cards = list(cards)
    values = [c.value for c in cards]
    if len(cards) == 3:
        hand_type, tiebreak = _detect_three(values)
    elif len(cards) == 5:
        hand_type, tiebreak = _detect_five(values, [c.suit for c in cards])
    else:
        raise ValueError(f"Rows hold 3 or 5 cards, got {len(cards)}")
    return DetectedHand(hand_type, tiebreak, cards)


def score_hand(cards) -> int:
    """HandScore of a 3-card or 5-card row. Larger is stronger."""
    return detect_hand(cards).score
