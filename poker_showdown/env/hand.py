"""
FiveCardHand: exactly five distinct cards, kept in ascending rank order.
"""

from poker_showdown.config import HAND_SIZE
from poker_showdown.env.cards import Suit, format_cards
from poker_showdown.errors import DuplicateCardError, HandSizeError

_SUIT_ORDER = {suit: i for i, suit in enumerate(Suit)}


def _sort_key(card):
    return (card.rank, _SUIT_ORDER[card.suit])


class FiveCardHand:
    """
    Unordered set of five cards. Built per evaluation and thrown away.
    A repeated exact card is a caller bug and is rejected, not collapsed.
    """

    __slots__ = ("_cards", "_hand_type")

    def __init__(self, cards):
        cards = list(cards)
        if len(cards) != HAND_SIZE:
            raise HandSizeError(f"Hand size should be {HAND_SIZE}, got {len(cards)}")
        if len(set(cards)) != len(cards):
            seen, dupes = set(), []
            for c in cards:
                if c in seen:
                    dupes.append(str(c))
                seen.add(c)
            raise DuplicateCardError(f"Repeated card(s) in hand: {', '.join(dupes)}")
        self._cards = tuple(sorted(cards, key=_sort_key))
        self._hand_type = None

    @property
    def cards(self):
        """Ascending by rank."""
        return self._cards

    def ranks(self):
        return [c.rank for c in self._cards]

    def ranks_descending(self):
        return [c.rank for c in reversed(self._cards)]

    @property
    def hand_type(self):
        if self._hand_type is None:
            from poker_showdown.env.hand_eval import classify
            self._hand_type = classify(self)
        return self._hand_type

    def __iter__(self):
        return iter(self._cards)

    def __len__(self):
        return len(self._cards)

    def __contains__(self, card):
        return card in self._cards

    # Value identity is the card set; ordering is the poker comparator.
    def __eq__(self, other):
        if not isinstance(other, FiveCardHand):
            return NotImplemented
        return set(self._cards) == set(other._cards)

    def __hash__(self):
        return hash(frozenset(self._cards))

    def _cmp(self, other):
        from poker_showdown.env.hand_eval import compare
        return compare(self, other)

    def __lt__(self, other):
        if not isinstance(other, FiveCardHand):
            return NotImplemented
        return self._cmp(other) < 0

    def __le__(self, other):
        if not isinstance(other, FiveCardHand):
            return NotImplemented
        return self._cmp(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, FiveCardHand):
            return NotImplemented
        return self._cmp(other) > 0

    def __ge__(self, other):
        if not isinstance(other, FiveCardHand):
            return NotImplemented
        return self._cmp(other) >= 0

    def __repr__(self):
        return f"FiveCardHand({format_cards(self._cards)})"

    def __str__(self):
        return format_cards(self._cards)
