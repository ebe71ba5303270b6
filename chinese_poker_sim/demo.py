#!/usr/bin/env python3
"""
Command-line front end for the split simulator.

    python -m chinese_poker_sim.demo AH KD QC JS 9H 8D 7C 6S 5H 4D 3C 2S 2H
    python -m chinese_poker_sim.demo            # runs the built-in demos
"""

import argparse
import json
import logging
import sys
from dataclasses import replace

from .engine.deck import Card, Suit
from .engine.errors import InvalidInputError, SimulationError
from .engine.hand_detector import detect_hand
from .presets import get_preset, list_presets
from .simulator import Simulator

DEMO_HANDS = {
    "Quads": ["AH", "AD", "AC", "AS", "2H", "3D", "4C", "6S", "7H", "8D", "9C", "JS", "QH"],
    "Straight flush": ["5H", "6H", "7H", "8H", "9H", "2D", "3C", "JS", "QD", "KC", "KS", "4D", "TC"],
    "Ordinary": ["AH", "KD", "QC", "JS", "9H", "8D", "7C", "6S", "4H", "4D", "3C", "2S", "2H"],
}


def demo_hand_detection():
    """Demonstrate row scoring."""
    print("=" * 60)
    print("HAND DETECTION DEMO")
    print("=" * 60)

    test_hands = [
        # Front row pair
        [Card("K", Suit.HEARTS), Card("K", Suit.DIAMONDS), Card("5", Suit.CLUBS)],
        # Front row trips
        [Card("7", Suit.HEARTS), Card("7", Suit.DIAMONDS), Card("7", Suit.CLUBS)],
        # Flush
        [Card("A", Suit.HEARTS), Card("K", Suit.HEARTS), Card("T", Suit.HEARTS),
         Card("7", Suit.HEARTS), Card("2", Suit.HEARTS)],
        # Wheel
        [Card("A", Suit.HEARTS), Card("2", Suit.DIAMONDS), Card("3", Suit.CLUBS),
         Card("4", Suit.SPADES), Card("5", Suit.HEARTS)],
        # Full House
        [Card("Q", Suit.HEARTS), Card("Q", Suit.DIAMONDS), Card("Q", Suit.CLUBS),
         Card("9", Suit.SPADES), Card("9", Suit.HEARTS)],
    ]

    for cards in test_hands:
        detected = detect_hand(cards)
        print(f"\nCards: {', '.join(str(c) for c in cards)}")
        print(f"  Hand: {detected.hand_type.label}")
        print(f"  Score: {detected.score}")


def demo_simulations(sim: Simulator):
    """Run the simulator on a few fixed hands."""
    for name, hand in DEMO_HANDS.items():
        print("\n" + "=" * 60)
        print(f"{name.upper()} HAND")
        print("=" * 60)
        print(f"Cards: {' '.join(hand)}")
        print(sim.run(hand))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find the best front/middle/back split of 13 cards")
    parser.add_argument("cards", nargs="*", help="13 card tokens, e.g. AH TD 2C")
    parser.add_argument("--preset", default="standard", choices=list_presets(), help="Solver preset")
    parser.add_argument("--iterations", "-n", type=int, help="Trials per candidate split")
    parser.add_argument("--top", type=int, help="Candidates passed to Monte Carlo")
    parser.add_argument("--workers", type=int, help="Worker processes")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible runs")
    parser.add_argument("--json", action="store_true", help="Print the result record as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = get_preset(args.preset).config
    overrides = {
        "iterations": args.iterations,
        "top_k": args.top,
        "workers": args.workers,
        "seed": args.seed,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})
    sim = Simulator(config)

    if not args.cards:
        demo_hand_detection()
        demo_simulations(Simulator(replace(config, iterations=min(config.iterations, 1000))))
        print("\n" + "=" * 60)
        print("SIMULATION COMPLETE")
        print("=" * 60)
        return 0

    try:
        result = sim.run(args.cards)
    except InvalidInputError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2
    except SimulationError as e:
        print(f"Simulation failed: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
