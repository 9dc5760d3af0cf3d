"""
Main entry point for heads-up hand-ranking showdowns.

Usage:
    python main.py round                      # Deal and print one round
    python main.py compare "AH KH QH JH TH" "2C 2D 2H 5S 5H"
    python main.py best "AH KD 7C 7S 2H 9D 7D"
    python main.py simulate [rounds]          # Repeated rounds with a summary
"""

import sys
import time

from poker_showdown.config import DEFAULT_SEED, SIMULATE_ROUNDS_DEFAULT
from poker_showdown.env import (
    FiveCardHand,
    Ordering,
    best_hand,
    compare,
    parse_cards,
    play_round,
)
from poker_showdown.errors import HandError, InvalidCardError, NotEnoughCardsError
from poker_showdown.evaluation import simulate
from poker_showdown.logging_utils import setup_logging


def run_round(args):
    print(play_round())


def run_compare(args):
    if len(args) != 2:
        print('Usage: python main.py compare "<5 cards>" "<5 cards>"')
        sys.exit(1)
    hand_a = FiveCardHand(parse_cards(args[0]))
    hand_b = FiveCardHand(parse_cards(args[1]))
    print(f"{hand_a} \tvs {hand_b}")
    print(f"{hand_a.hand_type}\t\tvs {hand_b.hand_type}")
    order = compare(hand_a, hand_b)
    if order == Ordering.GREATER:
        print("Winner\t\t\tvs Loser")
    elif order == Ordering.LESS:
        print("Loser\t\t\tvs Winner")
    else:
        print("It's a draw!?")


def run_best(args):
    if len(args) != 1:
        print('Usage: python main.py best "<5-7 cards>"')
        sys.exit(1)
    hand = best_hand(parse_cards(args[0]))
    print(f"{hand}  {hand.hand_type}")


def run_simulate(args):
    num_rounds = int(args[0]) if args else SIMULATE_ROUNDS_DEFAULT

    print("=" * 60)
    print("Heads-up showdown simulation")
    print("=" * 60)

    start = time.time()
    stats = simulate(num_rounds, seed=DEFAULT_SEED)
    print(f"Time: {time.time() - start:.1f}s\n")
    print(stats.summary())


if __name__ == "__main__":
    setup_logging()
    mode = sys.argv[1] if len(sys.argv) > 1 else "round"

    modes = {
        "round": run_round,
        "compare": run_compare,
        "best": run_best,
        "simulate": run_simulate,
    }

    if mode not in modes:
        print(f"Unknown mode: {mode}")
        print(f"Available: {', '.join(modes.keys())}")
        sys.exit(1)
    try:
        modes[mode](sys.argv[2:])
    except (InvalidCardError, HandError, NotEnoughCardsError) as e:
        print(f"ERROR: {e}")
        sys.exit(1)
