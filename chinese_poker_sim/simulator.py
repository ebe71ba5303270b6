"""
Main API for the split simulator.
Provides a clean interface for finding the best split of a 13-card hand.
"""

import logging
import random
import threading
import time
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

from .engine.auto_win import AutoWinType, detect_auto_win
from .engine.deck import Card, format_cards, parse_cards, remaining_pool
from .engine.errors import InvalidHandError, NoValidSplitError
from .engine.hand_detector import detect_hand
from .engine.monte_carlo import (DEFAULT_ITERATIONS, CandidateResult, best_candidate,
                                  evaluate_candidates, validate_iterations)
from .engine.ranking import rank_splits
from .engine.splits import HAND_SIZE, iter_valid_splits, split_in_order
from .presets import Preset, SolverConfig, get_preset, list_presets

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Outcome of one simulation call."""
    iterations: int
    win_rate: float
    front: list[Card]
    middle: list[Card]
    back: list[Card]
    auto_win: Optional[AutoWinType] = None
    candidates: list[CandidateResult] = field(default_factory=list)
    splits_considered: int = 0
    elapsed: float = 0.0

    def __str__(self):
        header = f"AUTO WIN - {self.auto_win.value}" if self.auto_win else "BEST SPLIT"
        lines = [
            f"{'='*50}",
            f"  {header}",
            f"{'='*50}",
        ]
        for label, row in (("Front", self.front), ("Middle", self.middle), ("Back", self.back)):
            hand = detect_hand(row)
            lines.append(f"  {label:<7} {' '.join(format_cards(row)):<16} {hand.hand_type.label}")
        lines.append(f"  Win rate: {self.win_rate * 100:.2f}% ({self.iterations} iterations)")
        if not self.auto_win:
            lines.append(f"  Candidates simulated: {len(self.candidates)} of {self.splits_considered} valid splits")
        lines.append(f"  Time: {self.elapsed:.2f}s")
        lines.append(f"{'='*50}")
        return "\n".join(lines)

    def to_dict(self):
        data = {
            "iterations": self.iterations,
            "winRate": self.win_rate,
            "front": format_cards(self.front),
            "middle": format_cards(self.middle),
            "back": format_cards(self.back),
        }
        if self.auto_win:
            data["autoWin"] = self.auto_win.value
        return data


class Simulator:
    """
    Finds the split of 13 cards most likely to beat a random opposing hand.

    Usage:
        sim = Simulator()
        result = sim.run(["AH", "KD", ...], iterations=5000)
        print(result)

        # Or with a preset:
        result = Simulator("quick").run(cards)
    """

    def __init__(self, config: Union[SolverConfig, Preset, str, None] = None):
        if isinstance(config, str):
            preset = get_preset(config)
            if preset is None:
                raise ValueError(f"Unknown preset: {config}. Available: {list_presets()}")
            config = preset.config
        elif isinstance(config, Preset):
            config = config.config
        self.config = config or SolverConfig()

    def run(self, my_cards: Sequence[Union[Card, str]],
            iterations: Optional[int] = None,
            seed: Optional[int] = None,
            cancel_event: Optional[threading.Event] = None) -> SimulationResult:
        """
        Evaluate a 13-card hand.

        Args:
            my_cards: Card objects or tokens such as "TH"
            iterations: Trials per candidate split (defaults to the config's)
            seed: Seed for the random source (defaults to the config's)
            cancel_event: Set from another thread to abort between candidates

        Returns:
            SimulationResult with the best split and its estimated win rate
        """
        start = time.perf_counter()
        my_cards = list(my_cards)
        if len(my_cards) != HAND_SIZE:
            raise InvalidHandError(f"Provide exactly {HAND_SIZE} cards, got {len(my_cards)}")
        cards = parse_cards(my_cards)
        iterations = validate_iterations(self.config.iterations if iterations is None else iterations)

        auto_win = detect_auto_win(cards)
        if auto_win:
            logger.info("Auto win (%s), skipping split search", auto_win.value)
            split = split_in_order(cards)
            return SimulationResult(
                iterations=iterations,
                win_rate=1.0,
                front=list(split.front),
                middle=list(split.middle),
                back=list(split.back),
                auto_win=auto_win,
                elapsed=time.perf_counter() - start,
            )

        # Splits are counted as they stream into the ranker
        considered = 0

        def counted(splits):
            nonlocal considered
            for split in splits:
                considered += 1
                yield split

        top = rank_splits(counted(iter_valid_splits(cards)), self.config.top_k)
        logger.debug("%d valid splits, %d kept for simulation", considered, len(top))
        if not top:
            raise NoValidSplitError("No valid splits found")

        rng = random.Random(self.config.seed if seed is None else seed)
        candidates = evaluate_candidates(
            top, remaining_pool(cards), iterations,
            rng=rng, workers=self.config.workers, cancel_event=cancel_event,
        )
        best = best_candidate(candidates)
        logger.info("Best split %s wins %.2f%% of %d trials", best.split, best.win_rate * 100, iterations)

        return SimulationResult(
            iterations=iterations,
            win_rate=best.win_rate,
            front=list(best.split.front),
            middle=list(best.split.middle),
            back=list(best.split.back),
            candidates=candidates,
            splits_considered=considered,
            elapsed=time.perf_counter() - start,
        )


# Convenience function
def run(my_cards: Sequence[Union[Card, str]], iterations: int = DEFAULT_ITERATIONS,
        seed: Optional[int] = None) -> SimulationResult:
    """Quick run with the default simulator."""
    return Simulator().run(my_cards, iterations=iterations, seed=seed)
