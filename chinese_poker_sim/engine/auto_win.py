"""
Auto-win detection over the raw 13 held cards.
"""

import logging
from collections import Counter, defaultdict
from enum import Enum
from typing import Optional

from .deck import Card
from .hand_detector import is_straight

logger = logging.getLogger(__name__)


class AutoWinType(Enum):
    QUADS = "Quads"
    STRAIGHT_FLUSH = "Straight Flush"


def detect_auto_win(cards: list[Card]) -> Optional[AutoWinType]:
    """
    Scan the held cards for an unconditional win.

    Quads are checked before straight flushes and only the first hit is
    reported. The pattern only has to exist among the 13 cards; whether it
    fits into a single row of a legal split is not checked.
    """
    rank_counts = Counter(c.rank for c in cards)
    for rank, count in rank_counts.items():
        if count == 4:
            logger.debug("Auto-win: four %s", rank)
            return AutoWinType.QUADS

    suit_groups = defaultdict(list)
    for card in cards:
        suit_groups[card.suit].append(card.value)
    for suit, values in suit_groups.items():
        if len(values) >= 5 and is_straight(values):
            logger.debug("Auto-win: straight run in %s", suit.name.lower())
            return AutoWinType.STRAIGHT_FLUSH

    return None
