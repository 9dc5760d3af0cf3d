"""
Central configuration: deck and hand sizes, round layout, simulation defaults.
"""

# Cards
NUM_RANKS = 13
NUM_SUITS = 4
DECK_SIZE = NUM_RANKS * NUM_SUITS  # 52
HAND_SIZE = 5

# Round layout: two private cards per player + five shared
NUM_HOLE_CARDS = 2
NUM_BOARD_CARDS = 5

# Simulation
SIMULATE_ROUNDS_DEFAULT = 10_000
LOG_INTERVAL = 1_000
DEFAULT_SEED = 42

# Weakest hand counted as "notable" by the simulation report.
# Name of a HandCategory member.
REPORT_THRESHOLD = "FULL_HOUSE"
