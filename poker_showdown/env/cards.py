"""
Card model: Suit, Rank, Card.
Rank carries a stable 0-12 index (0=2 .. 12=A) used for histogram lookups.
Cards order by rank only; suit never breaks a tie.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, List

from poker_showdown.errors import InvalidCardError


class Ordering(IntEnum):
    """Three-way comparison result."""
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, a, b) -> "Ordering":
        if a < b:
            return cls.LESS
        if a > b:
            return cls.GREATER
        return cls.EQUAL


class Suit(Enum):
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"

    @property
    def char(self) -> str:
        return self.value

    def __str__(self):
        return self.value


class Rank(IntEnum):
    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    @property
    def char(self) -> str:
        return RANK_CHARS[self]

    @staticmethod
    def compare(a: "Rank", b: "Rank") -> Ordering:
        return Ordering.of(int(a), int(b))

    def __str__(self):
        return self.char


RANK_CHARS = "23456789TJQKA"
_RANK_BY_CHAR = {ch: Rank(i) for i, ch in enumerate(RANK_CHARS)}
_SUIT_BY_CHAR = {s.value: s for s in Suit}


@dataclass(frozen=True)
class Card:
    suit: Suit
    rank: Rank

    @staticmethod
    def compare(a: "Card", b: "Card") -> Ordering:
        return Rank.compare(a.rank, b.rank)

    @classmethod
    def from_str(cls, code: str) -> "Card":
        """Parse a two-character code such as 'TH' or 'as'."""
        code = code.strip()
        if len(code) != 2:
            raise InvalidCardError(f"Card code must be 2 characters, got {code!r}")
        rank = _RANK_BY_CHAR.get(code[0].upper())
        suit = _SUIT_BY_CHAR.get(code[1].upper())
        if rank is None or suit is None:
            raise InvalidCardError(f"Unknown card code {code!r}")
        return cls(suit, rank)

    # Rank-only ordering; == and hash still use both fields.
    def __lt__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank

    def __str__(self):
        return f"{self.rank.char}{self.suit.char}"


def parse_cards(text: str) -> List[Card]:
    """'AH KH QH' -> [Card(...), ...]. Commas are accepted as separators."""
    return [Card.from_str(tok) for tok in text.replace(",", " ").split()]


def format_cards(cards: Iterable[Card]) -> str:
    return "[" + " ".join(str(c) for c in cards) + "]"
