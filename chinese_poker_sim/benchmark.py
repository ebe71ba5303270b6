#!/usr/bin/env python3
"""
Compare solver presets on the same hands.
"""

import random
import time

from .engine.deck import Deck, format_cards
from .presets import PRESETS
from .simulator import Simulator


def random_hands(count: int, seed: int = None) -> list[list[str]]:
    """Deal `count` random 13-card hands as tokens."""
    rng = random.Random(seed)
    deck = Deck.standard_52().cards
    return [format_cards(rng.sample(deck, 13)) for _ in range(count)]


def compare_presets(hands: list[list[str]], presets: list[str] = None, seed: int = 0):
    """Run every preset on every hand and print win rate and timing."""
    names = presets or [name for name in PRESETS if name != "parallel"]

    print("=" * 70)
    print(f"PRESET COMPARISON ({len(hands)} hands)")
    print("=" * 70)

    results = {}

    for name in names:
        print(f"\nTesting: {PRESETS[name].name}...", end=" ", flush=True)
        sim = Simulator(name)

        start_time = time.time()
        win_rates = []
        auto_wins = 0
        for hand in hands:
            result = sim.run(hand, seed=seed)
            if result.auto_win:
                auto_wins += 1
            else:
                win_rates.append(result.win_rate)
        elapsed = time.time() - start_time

        results[name] = {
            "avg_win_rate": sum(win_rates) / len(win_rates) if win_rates else 0.0,
            "max_win_rate": max(win_rates, default=0.0),
            "auto_wins": auto_wins,
            "time": elapsed,
        }

        print(f"Done ({elapsed:.1f}s)")

    print("\n" + "=" * 70)
    print("RESULTS")
    print("=" * 70)
    print(f"{'Preset':<20} {'Avg Win %':>10} {'Max Win %':>10} {'Auto':>6} {'Time':>10}")
    print("-" * 70)

    for name, stats in results.items():
        print(f"{PRESETS[name].name:<20} {stats['avg_win_rate'] * 100:>9.2f}% "
              f"{stats['max_win_rate'] * 100:>9.2f}% {stats['auto_wins']:>6} {stats['time']:>9.1f}s")

    return results


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Compare split simulator presets")
    parser.add_argument("--hands", type=int, default=5, help="Number of random hands")
    parser.add_argument("--seed", type=int, default=0, help="Seed for dealing and simulation")
    parser.add_argument("--preset", action="append", choices=list(PRESETS), help="Preset to include (repeatable)")

    args = parser.parse_args()

    compare_presets(random_hands(args.hands, args.seed), args.preset, seed=args.seed)
