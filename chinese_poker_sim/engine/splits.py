"""
Enumeration of legal front/middle/back splits of a 13-card hand.
"""

import logging
from dataclasses import dataclass, field
from itertools import combinations
from typing import Iterator, Optional, Sequence

from .deck import Card, format_cards
from .errors import NoValidSplitError
from .hand_detector import score_hand

logger = logging.getLogger(__name__)

FRONT_SIZE = 3
MIDDLE_SIZE = 5
BACK_SIZE = 5
HAND_SIZE = FRONT_SIZE + MIDDLE_SIZE + BACK_SIZE


@dataclass(frozen=True)
class Split:
    """A 3/5/5 partition of the held cards."""
    front: tuple[Card, ...]
    middle: tuple[Card, ...]
    back: tuple[Card, ...]
    # Filled in by the generator, which has already scored every row
    row_scores: Optional[tuple[int, int, int]] = field(default=None, compare=False, repr=False)

    @property
    def rows(self) -> tuple[tuple[Card, ...], ...]:
        return (self.front, self.middle, self.back)

    @property
    def cards(self) -> list[Card]:
        return [*self.front, *self.middle, *self.back]

    @property
    def scores(self) -> tuple[int, int, int]:
        if self.row_scores is not None:
            return self.row_scores
        return (score_hand(self.front), score_hand(self.middle), score_hand(self.back))

    def is_valid(self) -> bool:
        """Rows are non-decreasing in strength from front to back."""
        front, middle, back = self.scores
        return front <= middle <= back

    def to_dict(self) -> dict:
        return {
            "front": format_cards(self.front),
            "middle": format_cards(self.middle),
            "back": format_cards(self.back),
        }

    def __str__(self) -> str:
        return " | ".join(" ".join(format_cards(row)) for row in self.rows)


def split_in_order(cards: Sequence[Card]) -> Split:
    """Slice cards 0-2 / 3-7 / 8-12 without any search."""
    cards = tuple(cards)
    return Split(
        front=cards[:FRONT_SIZE],
        middle=cards[FRONT_SIZE:FRONT_SIZE + MIDDLE_SIZE],
        back=cards[FRONT_SIZE + MIDDLE_SIZE:HAND_SIZE],
    )


def iter_valid_splits(cards: Sequence[Card]) -> Iterator[Split]:
    """
    Lazily yield every non-fouling split.

    Fronts are taken in combination order; for each front, every 5-card
    middle from the remaining cards, with the back being what is left.
    Each distinct card subset is scored once.
    """
    cards = tuple(cards)
    indices = range(len(cards))
    cache: dict[tuple[int, ...], int] = {}

    def row_score(idx: tuple[int, ...]) -> int:
        score = cache.get(idx)
        if score is None:
            score = cache[idx] = score_hand([cards[i] for i in idx])
        return score

    for front_idx in combinations(indices, FRONT_SIZE):
        rest = tuple(i for i in indices if i not in front_idx)
        front_score = row_score(front_idx)
        for middle_idx in combinations(rest, MIDDLE_SIZE):
            middle_score = row_score(middle_idx)
            if front_score > middle_score:
                continue
            back_idx = tuple(i for i in rest if i not in middle_idx)
            if len(back_idx) != BACK_SIZE:
                continue
            back_score = row_score(back_idx)
            if middle_score > back_score:
                continue
            yield Split(
                front=tuple(cards[i] for i in front_idx),
                middle=tuple(cards[i] for i in middle_idx),
                back=tuple(cards[i] for i in back_idx),
                row_scores=(front_score, middle_score, back_score),
            )


def generate_valid_splits(cards: Sequence[Card]) -> list[Split]:
    """All non-fouling splits, in enumeration order."""
    splits = list(iter_valid_splits(cards))
    logger.debug("Enumerated %d valid splits", len(splits))
    if not splits:
        raise NoValidSplitError("No valid splits found")
    return splits
