"""
5-card hand evaluation: classify, compare, and best-of-N selection.
Ranks index 0..12 (0=2 .. 12=A), so a hand's rank histogram is a bincount.
"""

import logging
from itertools import combinations

import numpy as np

from poker_showdown.config import HAND_SIZE, NUM_RANKS
from poker_showdown.env.cards import Card, Ordering, Rank
from poker_showdown.env.hand import FiveCardHand
from poker_showdown.env.hand_type import HandCategory, HandType
from poker_showdown.errors import NotEnoughCardsError

logger = logging.getLogger(__name__)

_WHEEL = [Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.ACE]


def rank_histogram(hand):
    """Count of cards per rank, length 13."""
    return np.bincount([int(c.rank) for c in hand], minlength=NUM_RANKS)


def is_flush(hand):
    cards = list(hand)
    suit = cards[0].suit
    return all(c.suit == suit for c in cards[1:])


def is_straight(hand):
    """
    Consecutive ranks in ascending order. The only gap allowed is
    Five -> Ace, which makes A-2-3-4-5 (the wheel) a straight.
    """
    ranks = sorted(c.rank for c in hand)
    prev = ranks[0]
    for rank in ranks[1:]:
        if rank != prev + 1 and not (prev == Rank.FIVE and rank == Rank.ACE):
            return False
        prev = rank
    return True


def _grouped_type(hand):
    """
    HandType for hands with a repeated rank, else None.
    A hand with a repeated rank can be neither a straight nor a flush.
    """
    dist = rank_histogram(hand)
    quads = np.flatnonzero(dist == 4)
    if len(quads):
        return HandType.quad(Rank(int(quads[0])))
    trips = np.flatnonzero(dist == 3)
    pairs = np.flatnonzero(dist == 2)  # ascending rank order
    if len(trips):
        trip_rank = Rank(int(trips[0]))
        if len(pairs):
            return HandType.full_house(trip_rank, Rank(int(pairs[0])))
        return HandType.trip(trip_rank)
    if len(pairs) == 2:
        return HandType.two_pair(Rank(int(pairs[1])), Rank(int(pairs[0])))
    if len(pairs) == 1:
        return HandType.one_pair(Rank(int(pairs[0])))
    return None


def classify(hand):
    """HandType of a FiveCardHand."""
    grouped = _grouped_type(hand)
    if grouped is not None:
        return grouped
    straight = is_straight(hand)
    flush = is_flush(hand)
    if straight and flush:
        return HandType.straight_flush()
    if straight:
        return HandType.straight()
    if flush:
        return HandType.flush()
    return HandType.high_card()


def _is_wheel(hand):
    return sorted(c.rank for c in hand) == _WHEEL


def playing_order(hand):
    """
    Cards from highest to lowest for the raw-card tie-break.
    In a wheel the Ace plays low, so it goes last.
    """
    cards = sorted(hand, reverse=True)
    if hand.hand_type.category in (HandCategory.STRAIGHT, HandCategory.STRAIGHT_FLUSH) and _is_wheel(hand):
        cards = cards[1:] + cards[:1]
    return cards


def compare(a, b):
    """
    Total order over five-card hands: HandType first, then the five cards
    pairwise from highest to lowest rank. Equal means a true draw.
    """
    order = a.hand_type.compare(b.hand_type)
    if order != Ordering.EQUAL:
        return order
    for card_a, card_b in zip(playing_order(a), playing_order(b)):
        order = Card.compare(card_a, card_b)
        if order != Ordering.EQUAL:
            return order
    return Ordering.EQUAL


def best_hand(cards):
    """
    Best five-card hand out of N >= 5 cards.
    Every 5-card combination is tried once; the first maximal one wins ties.
    """
    card_list = list(cards)
    if len(card_list) < HAND_SIZE:
        raise NotEnoughCardsError(
            f"Need at least {HAND_SIZE} cards to pick a hand, got {len(card_list)}"
        )
    best = None
    n_combos = 0
    for combo in combinations(card_list, HAND_SIZE):
        hand = FiveCardHand(combo)
        n_combos += 1
        if best is None or compare(hand, best) == Ordering.GREATER:
            best = hand
    logger.debug("best_hand: %d combinations -> %s (%s)", n_combos, best, best.hand_type)
    return best


def evaluate_hand(cards):
    """HandType of the best hand that can be made from 5-7+ cards."""
    return best_hand(cards).hand_type
