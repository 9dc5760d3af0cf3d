"""
HandType: a hand category plus the ranks that break ties inside it.

    HighCard | OnePair(r) | TwoPair(high, low) | Trip(r) | Straight | Flush
    | FullHouse(trip, pair) | Quad(r) | StraightFlush

Ordering is explicit: category first, then the embedded ranks field by field.
"""

from enum import IntEnum
from typing import Tuple

from poker_showdown.env.cards import Ordering, Rank


class HandCategory(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    TRIP = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    QUAD = 7
    STRAIGHT_FLUSH = 8


# Number of embedded ranks per category
_ARITY = {
    HandCategory.HIGH_CARD: 0,
    HandCategory.ONE_PAIR: 1,
    HandCategory.TWO_PAIR: 2,
    HandCategory.TRIP: 1,
    HandCategory.STRAIGHT: 0,
    HandCategory.FLUSH: 0,
    HandCategory.FULL_HOUSE: 2,
    HandCategory.QUAD: 1,
    HandCategory.STRAIGHT_FLUSH: 0,
}

_LABELS = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.ONE_PAIR: "Pair of {0}",
    HandCategory.TWO_PAIR: "Two Pair of {0} and {1}",
    HandCategory.TRIP: "Trip of {0}",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House of {0} over {1}",
    HandCategory.QUAD: "Quad of {0}",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
}


def compare_hand_types(a: "HandType", b: "HandType") -> Ordering:
    """Category ordinal first; on a tie, embedded ranks in declared order."""
    if a.category != b.category:
        return Ordering.of(a.category, b.category)
    for ra, rb in zip(a.ranks, b.ranks):
        order = Rank.compare(ra, rb)
        if order != Ordering.EQUAL:
            return order
    return Ordering.EQUAL


class HandType:
    __slots__ = ("category", "ranks")

    def __init__(self, category: HandCategory, ranks: Tuple[Rank, ...] = ()):
        category = HandCategory(category)
        ranks = tuple(Rank(r) for r in ranks)
        if len(ranks) != _ARITY[category]:
            raise ValueError(
                f"{category.name} takes {_ARITY[category]} rank(s), got {len(ranks)}"
            )
        if category == HandCategory.TWO_PAIR and ranks[0] <= ranks[1]:
            raise ValueError("TwoPair ranks must be (higher pair, lower pair)")
        if category == HandCategory.FULL_HOUSE and ranks[0] == ranks[1]:
            raise ValueError("FullHouse trip and pair ranks must differ")
        object.__setattr__(self, "category", category)
        object.__setattr__(self, "ranks", ranks)

    def __setattr__(self, name, value):
        raise AttributeError("HandType is immutable")

    # Variant constructors
    @classmethod
    def high_card(cls):
        return cls(HandCategory.HIGH_CARD)

    @classmethod
    def one_pair(cls, rank):
        return cls(HandCategory.ONE_PAIR, (rank,))

    @classmethod
    def two_pair(cls, high, low):
        return cls(HandCategory.TWO_PAIR, (high, low))

    @classmethod
    def trip(cls, rank):
        return cls(HandCategory.TRIP, (rank,))

    @classmethod
    def straight(cls):
        return cls(HandCategory.STRAIGHT)

    @classmethod
    def flush(cls):
        return cls(HandCategory.FLUSH)

    @classmethod
    def full_house(cls, trip, pair):
        return cls(HandCategory.FULL_HOUSE, (trip, pair))

    @classmethod
    def quad(cls, rank):
        return cls(HandCategory.QUAD, (rank,))

    @classmethod
    def straight_flush(cls):
        return cls(HandCategory.STRAIGHT_FLUSH)

    def compare(self, other: "HandType") -> Ordering:
        return compare_hand_types(self, other)

    def __eq__(self, other):
        if not isinstance(other, HandType):
            return NotImplemented
        return self.category == other.category and self.ranks == other.ranks

    def __hash__(self):
        return hash((self.category, self.ranks))

    def __lt__(self, other):
        if not isinstance(other, HandType):
            return NotImplemented
        return compare_hand_types(self, other) == Ordering.LESS

    def __le__(self, other):
        if not isinstance(other, HandType):
            return NotImplemented
        return compare_hand_types(self, other) != Ordering.GREATER

    def __gt__(self, other):
        if not isinstance(other, HandType):
            return NotImplemented
        return compare_hand_types(self, other) == Ordering.GREATER

    def __ge__(self, other):
        if not isinstance(other, HandType):
            return NotImplemented
        return compare_hand_types(self, other) != Ordering.LESS

    def __repr__(self):
        if not self.ranks:
            return f"HandType.{self.category.name}"
        args = ", ".join(r.name for r in self.ranks)
        return f"HandType.{self.category.name}({args})"

    def __str__(self):
        return _LABELS[self.category].format(*(r.char for r in self.ranks))
