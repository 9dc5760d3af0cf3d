"""
Poker hand ranking: classify and compare five-card hands, and pick the
best five out of a larger set.
"""

from poker_showdown.env import (
    Card,
    Deck,
    FiveCardHand,
    HandCategory,
    HandType,
    Ordering,
    Rank,
    Suit,
    best_hand,
    classify,
    compare,
    parse_cards,
    play_round,
)
from poker_showdown.errors import (
    DeckExhaustedError,
    DuplicateCardError,
    HandError,
    HandSizeError,
    InvalidCardError,
    NotEnoughCardsError,
)

__version__ = "0.1.0"

__all__ = [
    "Card",
    "Deck",
    "FiveCardHand",
    "HandCategory",
    "HandType",
    "Ordering",
    "Rank",
    "Suit",
    "best_hand",
    "classify",
    "compare",
    "parse_cards",
    "play_round",
    "DeckExhaustedError",
    "DuplicateCardError",
    "HandError",
    "HandSizeError",
    "InvalidCardError",
    "NotEnoughCardsError",
]
