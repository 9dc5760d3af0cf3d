"""
Precondition violations raised by the card model and hand evaluation.
"""


class InvalidCardError(ValueError):
    """A card code could not be parsed."""


class HandError(ValueError):
    """A five-card hand was built from bad input."""


class HandSizeError(HandError):
    pass


class DuplicateCardError(HandError):
    pass


class NotEnoughCardsError(ValueError):
    """Best-hand selection needs at least five cards."""


class DeckExhaustedError(RuntimeError):
    """The deck ran out while dealing a round."""
