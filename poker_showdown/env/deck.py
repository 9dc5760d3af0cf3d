"""
52-card deck with an injected random source.
Any object with a shuffle(list) method can shuffle the deck:
numpy.random.Generator (default) or random.Random.
"""

import logging

import numpy as np

from poker_showdown.env.cards import Card, Rank, Suit

logger = logging.getLogger(__name__)


def make_rng(seed=None):
    """numpy Generator; a fixed seed gives a reproducible deal."""
    return np.random.default_rng(seed)


class Deck:
    """
    Ordered cards, drawn from the end.
    A fresh deck holds one card per (Suit, Rank) in suit-major order.
    """

    __slots__ = ("_cards",)

    def __init__(self, cards=None):
        if cards is None:
            cards = [Card(suit, rank) for suit in Suit for rank in Rank]
        self._cards = list(cards)

    @classmethod
    def shuffled(cls, rng=None):
        deck = cls()
        deck.shuffle(rng)
        return deck

    @property
    def cards(self):
        return list(self._cards)

    def __len__(self):
        return len(self._cards)

    def __iter__(self):
        return iter(list(self._cards))

    def shuffle(self, rng=None):
        if rng is None:
            rng = make_rng()
        rng.shuffle(self._cards)
        return self

    def draw(self):
        """Top card, or None when the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop()

    def draw_many(self, count):
        """
        Up to `count` cards. Returns fewer when the deck runs out;
        callers compare the length against what they asked for.
        """
        drawn = []
        for _ in range(count):
            card = self.draw()
            if card is None:
                logger.debug("Deck exhausted after %d of %d cards", len(drawn), count)
                break
            drawn.append(card)
        return drawn

    def remove(self, cards):
        """Drop the given cards (e.g. ones already dealt) if present."""
        gone = set(cards)
        self._cards = [c for c in self._cards if c not in gone]
        return self
