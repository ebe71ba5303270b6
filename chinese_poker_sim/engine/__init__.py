"""
Split simulator engine components.
"""

from .deck import Card, Deck, Suit, RANKS, RANK_ORDER, parse_cards, format_cards, remaining_pool
from .hand_detector import HandType, DetectedHand, detect_hand, score_hand, is_straight, straight_high
from .auto_win import AutoWinType, detect_auto_win
from .splits import Split, iter_valid_splits, generate_valid_splits, split_in_order
from .ranking import TOP_SPLITS, heuristic_score, rank_splits
from .monte_carlo import (CandidateResult, DEFAULT_ITERATIONS, estimate, estimate_split,
                          evaluate_candidates, sample_opponent, beats_all_rows)
from .errors import (SimulationError, InvalidInputError, InvalidHandError,
                     NoValidSplitError, SimulationCancelled)
