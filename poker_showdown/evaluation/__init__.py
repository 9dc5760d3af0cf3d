"""
Evaluation: repeated showdowns, outcome rates and hand-type frequencies.
"""

from poker_showdown.evaluation.simulate import (
    SimulationStats,
    parse_threshold,
    simulate,
)

__all__ = [
    "SimulationStats",
    "parse_threshold",
    "simulate",
]
