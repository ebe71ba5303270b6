"""
Cheap heuristic pruning of candidate splits before Monte Carlo.
"""

import heapq
from typing import Iterable

from .splits import Split

TOP_SPLITS = 50


def heuristic_score(split: Split) -> int:
    """Sum of the three row scores. Tracks raw strength, not equity."""
    return sum(split.scores)


def rank_splits(splits: Iterable[Split], top_k: int = TOP_SPLITS) -> list[Split]:
    """
    Best `top_k` splits by heuristic score, strongest first.

    Equal scores keep their enumeration order.
    """
    if top_k < 1:
        raise ValueError(f"top_k must be at least 1, got {top_k}")
    # nlargest is stable for ties, same as a descending sort then slice
    return heapq.nlargest(top_k, splits, key=heuristic_score)
