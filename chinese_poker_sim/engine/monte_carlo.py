"""
Monte Carlo win-rate estimation for candidate splits.

Each trial deals an opposing 3/5/5 hand from the cards the player does not
hold. A trial is a win only if the player is strictly stronger in all three
rows; a tie in any row goes to the opponent.
"""

import logging
import random
import threading
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Optional, Sequence

from .deck import Card
from .errors import InvalidInputError, NoValidSplitError, SimulationCancelled
from .hand_detector import score_hand
from .ranking import heuristic_score
from .splits import FRONT_SIZE, MIDDLE_SIZE, HAND_SIZE, Split

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 5000
SEED_BITS = 32


@dataclass
class CandidateResult:
    """Monte Carlo outcome for one candidate split."""
    split: Split
    wins: int
    iterations: int
    heuristic: int

    @property
    def win_rate(self) -> float:
        return self.wins / self.iterations

    def to_dict(self) -> dict:
        return {
            **self.split.to_dict(),
            "wins": self.wins,
            "winRate": self.win_rate,
            "heuristic": self.heuristic,
        }


def validate_iterations(iterations) -> int:
    # bool is an int subclass
    if isinstance(iterations, bool) or not isinstance(iterations, int):
        raise InvalidInputError(f"iterations must be a positive integer, got {iterations!r}")
    if iterations < 1:
        raise InvalidInputError(f"iterations must be a positive integer, got {iterations}")
    return iterations


def sample_opponent(pool: Sequence[Card], rng: random.Random) -> tuple[list, list, list]:
    """Deal opposing front/middle/back from a fresh random ordering of the pool."""
    dealt = rng.sample(pool, HAND_SIZE)
    return (
        dealt[:FRONT_SIZE],
        dealt[FRONT_SIZE:FRONT_SIZE + MIDDLE_SIZE],
        dealt[FRONT_SIZE + MIDDLE_SIZE:],
    )


def beats_all_rows(player_scores: Sequence[int], opponent_rows: Sequence[Sequence[Card]]) -> bool:
    """True only if every player row strictly beats the matching opponent row."""
    for mine, row in zip(player_scores, opponent_rows):
        if mine <= score_hand(row):
            return False
    return True


def estimate_split(split: Split, pool: Sequence[Card], iterations: int,
                   rng: random.Random) -> tuple[int, float]:
    """Run `iterations` trials for one split. Returns (wins, win_rate)."""
    validate_iterations(iterations)
    player_scores = split.scores
    wins = 0
    for _ in range(iterations):
        if beats_all_rows(player_scores, sample_opponent(pool, rng)):
            wins += 1
    return wins, wins / iterations


def _run_candidate(split: Split, pool: Sequence[Card], iterations: int, seed: int) -> int:
    """Worker entry point; owns a private RNG seeded by the caller."""
    wins, _ = estimate_split(split, pool, iterations, random.Random(seed))
    return wins


def _check_cancel(cancel_event: Optional[threading.Event], done: int, total: int):
    if cancel_event is not None and cancel_event.is_set():
        raise SimulationCancelled(f"Cancelled after {done}/{total} candidates")


def evaluate_candidates(splits: Sequence[Split], pool: Sequence[Card], iterations: int,
                        rng: Optional[random.Random] = None, workers: int = 1,
                        cancel_event: Optional[threading.Event] = None) -> list[CandidateResult]:
    """
    Estimate every candidate's win rate, in candidate order.

    One seed per candidate is drawn from `rng` before any trial runs, so the
    outcome does not depend on `workers`. `cancel_event` is checked between
    candidates.
    """
    validate_iterations(iterations)
    splits = list(splits)
    pool = list(pool)
    if len(pool) < HAND_SIZE:
        raise InvalidInputError(f"Need at least {HAND_SIZE} cards to deal an opponent, got {len(pool)}")
    rng = rng or random.Random()
    seeds = [rng.getrandbits(SEED_BITS) for _ in splits]
    total = len(splits)

    if workers <= 1 or total <= 1:
        wins_list = []
        for i, (split, seed) in enumerate(zip(splits, seeds)):
            _check_cancel(cancel_event, i, total)
            wins = _run_candidate(split, pool, iterations, seed)
            logger.debug("Candidate %d/%d [%s]: %.4f", i + 1, total, split, wins / iterations)
            wins_list.append(wins)
    else:
        wins_list = [0] * total
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(_run_candidate, split, pool, iterations, seed): i
                for i, (split, seed) in enumerate(zip(splits, seeds))
            }
            try:
                for done, future in enumerate(as_completed(futures)):
                    _check_cancel(cancel_event, done, total)
                    wins_list[futures[future]] = future.result()
            except SimulationCancelled:
                for future in futures:
                    future.cancel()
                raise

    return [
        CandidateResult(split=split, wins=wins, iterations=iterations,
                        heuristic=heuristic_score(split))
        for split, wins in zip(splits, wins_list)
    ]


def best_candidate(results: Sequence[CandidateResult]) -> CandidateResult:
    """Highest win rate; on an exact tie the earliest candidate is kept."""
    best = None
    for result in results:
        if best is None or result.win_rate > best.win_rate:
            best = result
    if best is None:
        raise NoValidSplitError("No candidate splits to estimate")
    return best


def estimate(splits: Sequence[Split], pool: Sequence[Card], iterations: int = DEFAULT_ITERATIONS,
             rng: Optional[random.Random] = None, workers: int = 1,
             cancel_event: Optional[threading.Event] = None) -> tuple[Split, float]:
    """Pick the candidate with the best estimated win rate. Returns (split, win_rate)."""
    results = evaluate_candidates(splits, pool, iterations, rng=rng, workers=workers,
                                  cancel_event=cancel_event)
    best = best_candidate(results)
    return best.split, best.win_rate
