from itertools import combinations

import pytest

from poker_showdown.env import Card, Ordering, Rank, Suit, format_cards, parse_cards
from poker_showdown.errors import InvalidCardError


def test_rank_order_two_through_ace():
    ranks = list(Rank)
    assert ranks[0] == Rank.TWO and ranks[-1] == Rank.ACE
    for low, high in zip(ranks, ranks[1:]):
        assert low < high
        assert Rank.compare(low, high) == Ordering.LESS
        assert Rank.compare(high, low) == Ordering.GREATER


def test_rank_order_is_strict_total_order():
    ranks = list(Rank)
    for r in ranks:
        assert not r < r
        assert Rank.compare(r, r) == Ordering.EQUAL
    for a, b in combinations(ranks, 2):
        assert (a < b) != (b < a)
    for a in ranks:
        for b in ranks:
            for c in ranks:
                if a < b and b < c:
                    assert a < c


def test_rank_indices_are_stable():
    assert [int(r) for r in Rank] == list(range(13))


def test_card_order_ignores_suit():
    kh = Card(Suit.HEARTS, Rank.KING)
    ks = Card(Suit.SPADES, Rank.KING)
    assert Card.compare(kh, ks) == Ordering.EQUAL
    assert not kh < ks and not ks < kh
    assert kh <= ks and kh >= ks
    assert kh != ks


def test_card_compare_by_rank():
    two = Card(Suit.SPADES, Rank.TWO)
    ace = Card(Suit.HEARTS, Rank.ACE)
    assert Card.compare(two, ace) == Ordering.LESS
    assert ace > two


def test_card_equality_uses_both_fields():
    assert Card(Suit.CLUBS, Rank.NINE) == Card(Suit.CLUBS, Rank.NINE)
    assert len({Card(Suit.CLUBS, Rank.NINE), Card(Suit.CLUBS, Rank.NINE)}) == 1


def test_card_is_immutable():
    card = Card(Suit.CLUBS, Rank.NINE)
    with pytest.raises(AttributeError):
        card.rank = Rank.TEN


@pytest.mark.parametrize("code", ["2H", "9D", "TC", "JS", "QH", "KD", "AC"])
def test_render_and_parse(code):
    card = Card.from_str(code)
    assert str(card) == code


def test_render_all_rank_and_suit_chars():
    assert "".join(r.char for r in Rank) == "23456789TJQKA"
    assert "".join(s.char for s in Suit) == "HDCS"


def test_parse_lowercase_and_commas():
    assert parse_cards("ah, kd 2c") == [
        Card(Suit.HEARTS, Rank.ACE),
        Card(Suit.DIAMONDS, Rank.KING),
        Card(Suit.CLUBS, Rank.TWO),
    ]


@pytest.mark.parametrize("code", ["", "A", "10H", "1H", "AX", "ZZ"])
def test_parse_rejects_bad_codes(code):
    with pytest.raises(InvalidCardError):
        Card.from_str(code)


def test_format_cards():
    assert format_cards(parse_cards("2H 3D")) == "[2H 3D]"
