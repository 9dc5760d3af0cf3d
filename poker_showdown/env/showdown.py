"""
One heads-up showdown: two players, two hole cards each, five board cards.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from poker_showdown.config import NUM_BOARD_CARDS, NUM_HOLE_CARDS
from poker_showdown.env.cards import Card, Ordering, format_cards
from poker_showdown.env.deck import Deck
from poker_showdown.env.hand import FiveCardHand
from poker_showdown.env.hand_eval import best_hand, compare
from poker_showdown.env.hand_type import HandType
from poker_showdown.errors import DeckExhaustedError

logger = logging.getLogger(__name__)


class Verdict(Enum):
    """Outcome from player A's point of view."""
    WIN = "win"
    LOSS = "loss"
    TIE = "tie"


_VERDICT_OF = {
    Ordering.GREATER: Verdict.WIN,
    Ordering.LESS: Verdict.LOSS,
    Ordering.EQUAL: Verdict.TIE,
}

_VERDICT_LINE = {
    Verdict.WIN: "Winner\t\t\tvs Loser",
    Verdict.LOSS: "Loser\t\t\tvs Winner",
    Verdict.TIE: "It's a draw!?",
}


@dataclass(frozen=True)
class RoundResult:
    hole_a: Tuple[Card, ...]
    hole_b: Tuple[Card, ...]
    board: Tuple[Card, ...]
    best_a: FiveCardHand
    best_b: FiveCardHand
    verdict: Verdict

    @property
    def type_a(self) -> HandType:
        return self.best_a.hand_type

    @property
    def type_b(self) -> HandType:
        return self.best_b.hand_type

    def __str__(self):
        lines = [
            f"{format_cards(self.hole_a + self.board)} {format_cards(self.hole_b + self.board)}",
            f"Table: {format_cards(self.board)}",
            f"{self.best_a} \tvs {self.best_b}",
            f"{self.type_a}\t\tvs {self.type_b}",
            _VERDICT_LINE[self.verdict],
        ]
        return "\n".join(lines)


def _draw_exact(deck, count, what):
    cards = deck.draw_many(count)
    if len(cards) < count:
        raise DeckExhaustedError(f"Deck ran out dealing {what}: wanted {count}, got {len(cards)}")
    return tuple(cards)


def deal_round(deck):
    """Draw (hole_a, hole_b, board) from the top of the deck."""
    hole_a = _draw_exact(deck, NUM_HOLE_CARDS, "player A hole cards")
    hole_b = _draw_exact(deck, NUM_HOLE_CARDS, "player B hole cards")
    board = _draw_exact(deck, NUM_BOARD_CARDS, "the board")
    return hole_a, hole_b, board


def showdown(hole_a, hole_b, board):
    """Best hand for each player out of hole + board, and who wins."""
    hole_a, hole_b, board = tuple(hole_a), tuple(hole_b), tuple(board)
    best_a = best_hand(hole_a + board)
    best_b = best_hand(hole_b + board)
    verdict = _VERDICT_OF[compare(best_a, best_b)]
    logger.debug("showdown: %s (%s) vs %s (%s) -> %s",
                 best_a, best_a.hand_type, best_b, best_b.hand_type, verdict.value)
    return RoundResult(hole_a, hole_b, board, best_a, best_b, verdict)


def play_round(deck: Optional[Deck] = None, rng=None) -> RoundResult:
    """
    Play one round. Without a deck, a fresh one is shuffled with `rng`.
    A given deck is dealt as-is (shuffle it first if needed).
    """
    if deck is None:
        deck = Deck.shuffled(rng)
    return showdown(*deal_round(deck))
