import random
import threading

import pytest

from chinese_poker_sim.engine.deck import parse_cards, remaining_pool
from chinese_poker_sim.engine.errors import InvalidInputError, NoValidSplitError, SimulationCancelled
from chinese_poker_sim.engine.hand_detector import score_hand
from chinese_poker_sim.engine.monte_carlo import (CandidateResult, beats_all_rows, best_candidate,
                                                  estimate, estimate_split, evaluate_candidates,
                                                  sample_opponent, validate_iterations)
from chinese_poker_sim.engine.splits import Split


def make_split(front, middle, back):
    return Split(
        front=tuple(parse_cards(front.split())),
        middle=tuple(parse_cards(middle.split())),
        back=tuple(parse_cards(back.split())),
    )


STRONG = make_split("QH QD 3C", "9S 9C 9D 4H 2S", "AH KH TH 7H 5H")
MEDIUM = make_split("9S 3C 2S", "QH QD 9C 9D 4H", "AH KH TH 7H 5H")
HOPELESS = make_split("2H 3D 4C", "5S 6D 8C 9S JH", "QH QD QC KS KH")


@pytest.fixture
def pool():
    return remaining_pool(STRONG.cards)


@pytest.mark.parametrize("bad", [0, -1, 1.5, "100", None, True])
def test_iterations_must_be_a_positive_int(bad, pool):
    with pytest.raises(InvalidInputError):
        validate_iterations(bad)
    with pytest.raises(InvalidInputError):
        estimate([STRONG], pool, bad)


def test_sample_opponent_deals_fresh_rows(pool):
    before = list(pool)
    rng = random.Random(5)
    front, middle, back = sample_opponent(pool, rng)
    assert (len(front), len(middle), len(back)) == (3, 5, 5)
    dealt = front + middle + back
    assert len(set(dealt)) == 13
    assert set(dealt) <= set(pool)
    assert pool == before


def test_ties_go_to_the_opponent():
    rows = [parse_cards(t.split()) for t in ("KS KC 5D", "8H 8S 2C 3D 4S", "JH JD JC 6S 6C")]
    scores = [score_hand(r) for r in rows]
    assert not beats_all_rows(scores, rows)
    assert beats_all_rows([s + 1 for s in scores], rows)
    assert not beats_all_rows([scores[0] + 1, scores[1] + 1, scores[2]], rows)
    assert not beats_all_rows([scores[0] - 1, scores[1] + 1, scores[2] + 1], rows)


@pytest.mark.parametrize("iterations", [1, 7, 300])
def test_win_rate_is_a_probability(iterations, pool):
    wins, rate = estimate_split(STRONG, pool, iterations, random.Random(1))
    assert 0 <= wins <= iterations
    assert 0.0 <= rate <= 1.0
    assert rate == wins / iterations


def test_unwinnable_front_never_wins():
    # 4-high is the weakest possible front; an opponent can only tie or beat it
    pool = remaining_pool(HOPELESS.cards)
    _, rate = estimate_split(HOPELESS, pool, 500, random.Random(2))
    assert rate == 0.0


def test_seeded_runs_are_reproducible(pool):
    first = evaluate_candidates([STRONG, MEDIUM], pool, 300, rng=random.Random(42))
    second = evaluate_candidates([STRONG, MEDIUM], pool, 300, rng=random.Random(42))
    assert [r.wins for r in first] == [r.wins for r in second]


def test_worker_count_does_not_change_results(pool):
    candidates = [STRONG, MEDIUM, HOPELESS]
    serial = evaluate_candidates(candidates, pool, 200, rng=random.Random(9), workers=1)
    parallel = evaluate_candidates(candidates, pool, 200, rng=random.Random(9), workers=2)
    assert [r.wins for r in serial] == [r.wins for r in parallel]
    assert [r.split for r in parallel] == candidates


def test_estimate_picks_the_highest_win_rate(pool):
    split, rate = estimate([HOPELESS, STRONG, MEDIUM], pool, 400, rng=random.Random(3))
    results = evaluate_candidates([HOPELESS, STRONG, MEDIUM], pool, 400, rng=random.Random(3))
    assert rate == max(r.win_rate for r in results)
    assert split == STRONG


def test_exact_tie_keeps_the_first_candidate():
    results = [
        CandidateResult(split=HOPELESS, wins=10, iterations=100, heuristic=0),
        CandidateResult(split=STRONG, wins=30, iterations=100, heuristic=0),
        CandidateResult(split=MEDIUM, wins=30, iterations=100, heuristic=0),
    ]
    assert best_candidate(results).split == STRONG


def test_no_candidates_raises(pool):
    with pytest.raises(NoValidSplitError):
        estimate([], pool, 10)


def test_cancel_before_start(pool):
    event = threading.Event()
    event.set()
    with pytest.raises(SimulationCancelled):
        evaluate_candidates([STRONG, MEDIUM], pool, 100, cancel_event=event)


class TripAfter(threading.Event):
    """Reports set after a number of checks."""

    def __init__(self, checks):
        super().__init__()
        self.checks = checks

    def is_set(self):
        self.checks -= 1
        return self.checks < 0


def test_cancel_between_candidates(pool):
    with pytest.raises(SimulationCancelled, match="1/3"):
        evaluate_candidates([STRONG, MEDIUM, HOPELESS], pool, 100, cancel_event=TripAfter(1))


# Against these 13-card pools the opponent's best five-card row is two pair,
# so only the front can lose: pair of kings beats any front except pair of aces.
KINGS_UP = make_split("KH KD 2C", "QH QD QC 3S 4D", "2H 4H 6H 8H TH")
ONE_ACE_POOL = "AS 8S 9C 9D 7S 7H 5C 5D 3C 3H JS JD KC"
TWO_ACE_POOL = "AS AH 9C 9D 7S 7H 5C 5D 3C 3H JS JD KC"


def test_win_rate_is_exactly_one_when_no_front_can_match():
    pool = parse_cards(ONE_ACE_POOL.split())
    wins, rate = estimate_split(KINGS_UP, pool, 2000, random.Random(6))
    assert wins == 2000
    assert rate == 1.0


def test_win_rate_matches_a_counted_probability():
    # Opponent loses unless both aces land among its 3 front cards:
    # 11 of the C(13, 3) = 286 possible fronts, so 25/26 of deals are wins
    pool = parse_cards(TWO_ACE_POOL.split())
    _, rate = estimate_split(KINGS_UP, pool, 20000, random.Random(13))
    assert 0.0 < rate < 1.0
    assert rate == pytest.approx(25 / 26, abs=0.01)


def reference_win_rate(split, pool, iterations, seed):
    """Straightforward shuffle-and-compare simulation."""
    rng = random.Random(seed)
    mine = [score_hand(row) for row in split.rows]
    wins = 0
    for _ in range(iterations):
        deck = list(pool)
        rng.shuffle(deck)
        theirs = [score_hand(deck[0:3]), score_hand(deck[3:8]), score_hand(deck[8:13])]
        if all(m > t for m, t in zip(mine, theirs)):
            wins += 1
    return wins / iterations


def test_estimate_agrees_with_reference_simulation(pool):
    _, rate = estimate_split(STRONG, pool, 20000, random.Random(2024))
    expected = reference_win_rate(STRONG, pool, 20000, seed=77)
    assert 0.0 < rate < 1.0
    assert rate == pytest.approx(expected, abs=0.02)
