#!/usr/bin/env python3
"""
Play many heads-up rounds and report outcome rates and hand frequencies.
Usage:
  python scripts/simulate.py [--rounds 10000] [--seed 42]
  python scripts/simulate.py --rounds 2000 --threshold flush --show-notable
"""

import os
import sys
import argparse

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from poker_showdown.config import DEFAULT_SEED, REPORT_THRESHOLD, SIMULATE_ROUNDS_DEFAULT
from poker_showdown.evaluation import parse_threshold, simulate
from poker_showdown.logging_utils import setup_logging


def main():
    ap = argparse.ArgumentParser(description="Heads-up showdown simulation")
    ap.add_argument("--rounds", "-n", type=int, default=SIMULATE_ROUNDS_DEFAULT)
    ap.add_argument("--seed", type=int, default=DEFAULT_SEED,
                    help="RNG seed (negative for an unseeded run)")
    ap.add_argument("--threshold", default=REPORT_THRESHOLD,
                    help="Weakest hand category counted as notable, e.g. full_house")
    ap.add_argument("--show-notable", action="store_true",
                    help="Print every round where player A reaches the threshold")
    ap.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    ap.add_argument("--log-level", default=None, help="DEBUG / INFO / WARNING / ERROR")
    args = ap.parse_args()

    if args.log_level:
        setup_logging(args.log_level.upper())
    else:
        setup_logging()

    try:
        threshold = parse_threshold(args.threshold)
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    if args.rounds < 0:
        print(f"ERROR: --rounds must be >= 0, got {args.rounds}")
        sys.exit(1)

    def show(result):
        print(result)
        print()

    print("=" * 60)
    print(f"Showdown simulation: {args.rounds} rounds")
    print("=" * 60)
    stats = simulate(
        args.rounds,
        seed=args.seed if args.seed >= 0 else None,
        threshold=threshold,
        progress=not args.no_progress,
        on_notable=show if args.show_notable else None,
    )
    print(stats.summary())


if __name__ == "__main__":
    main()
