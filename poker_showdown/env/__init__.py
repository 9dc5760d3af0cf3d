"""
Card model, deck, hand classification/comparison and heads-up showdown.
"""

from poker_showdown.env.cards import (
    Card,
    Ordering,
    Rank,
    Suit,
    format_cards,
    parse_cards,
)
from poker_showdown.env.deck import Deck, make_rng
from poker_showdown.env.hand import FiveCardHand
from poker_showdown.env.hand_type import HandCategory, HandType, compare_hand_types
from poker_showdown.env.hand_eval import best_hand, classify, compare, evaluate_hand
from poker_showdown.env.showdown import (
    RoundResult,
    Verdict,
    deal_round,
    play_round,
    showdown,
)

__all__ = [
    "Card",
    "Ordering",
    "Rank",
    "Suit",
    "format_cards",
    "parse_cards",
    "Deck",
    "make_rng",
    "FiveCardHand",
    "HandCategory",
    "HandType",
    "compare_hand_types",
    "best_hand",
    "classify",
    "compare",
    "evaluate_hand",
    "RoundResult",
    "Verdict",
    "deal_round",
    "play_round",
    "showdown",
]
