"""HandType ordering, tested without going through classification."""

from itertools import combinations

import pytest

from poker_showdown.env import HandCategory, HandType, Ordering, Rank, compare_hand_types

ONE_OF_EACH = [
    HandType.high_card(),
    HandType.one_pair(Rank.ACE),
    HandType.two_pair(Rank.ACE, Rank.KING),
    HandType.trip(Rank.ACE),
    HandType.straight(),
    HandType.flush(),
    HandType.full_house(Rank.ACE, Rank.KING),
    HandType.quad(Rank.ACE),
    HandType.straight_flush(),
]


def test_category_order_ignores_ranks():
    weak_ranks = [
        HandType.high_card(),
        HandType.one_pair(Rank.TWO),
        HandType.two_pair(Rank.THREE, Rank.TWO),
        HandType.trip(Rank.TWO),
        HandType.straight(),
        HandType.flush(),
        HandType.full_house(Rank.TWO, Rank.THREE),
        HandType.quad(Rank.TWO),
        HandType.straight_flush(),
    ]
    for i, j in combinations(range(len(ONE_OF_EACH)), 2):
        # strong ranks in a weaker category still lose
        assert ONE_OF_EACH[i] < weak_ranks[j]
        assert compare_hand_types(weak_ranks[j], ONE_OF_EACH[i]) == Ordering.GREATER


def test_categories_listed_weakest_first():
    assert [t.category for t in ONE_OF_EACH] == list(HandCategory)


def test_one_pair_king_beats_queen():
    assert HandType.one_pair(Rank.KING) > HandType.one_pair(Rank.QUEEN)


def test_two_pair_first_field_decides():
    assert HandType.two_pair(Rank.KING, Rank.TWO) > HandType.two_pair(Rank.QUEEN, Rank.JACK)
    assert HandType.two_pair(Rank.KING, Rank.JACK) > HandType.two_pair(Rank.KING, Rank.TWO)


def test_full_house_trip_rank_then_pair_rank():
    assert HandType.full_house(Rank.THREE, Rank.TWO) > HandType.full_house(Rank.TWO, Rank.ACE)
    assert HandType.full_house(Rank.NINE, Rank.FIVE) < HandType.full_house(Rank.NINE, Rank.SIX)


def test_equal_types():
    a = HandType.trip(Rank.SEVEN)
    b = HandType.trip(Rank.SEVEN)
    assert a == b and hash(a) == hash(b)
    assert compare_hand_types(a, b) == Ordering.EQUAL
    assert a <= b and a >= b
    assert HandType.flush() == HandType.flush()


@pytest.mark.parametrize("hand_type,label", [
    (HandType.high_card(), "High Card"),
    (HandType.one_pair(Rank.KING), "Pair of K"),
    (HandType.two_pair(Rank.KING, Rank.FOUR), "Two Pair of K and 4"),
    (HandType.trip(Rank.SEVEN), "Trip of 7"),
    (HandType.straight(), "Straight"),
    (HandType.flush(), "Flush"),
    (HandType.full_house(Rank.TWO, Rank.FIVE), "Full House of 2 over 5"),
    (HandType.quad(Rank.TEN), "Quad of T"),
    (HandType.straight_flush(), "Straight Flush"),
])
def test_labels(hand_type, label):
    assert str(hand_type) == label


def test_payload_arity_is_checked():
    with pytest.raises(ValueError):
        HandType(HandCategory.ONE_PAIR)
    with pytest.raises(ValueError):
        HandType(HandCategory.FLUSH, (Rank.ACE,))


def test_two_pair_must_be_high_then_low():
    with pytest.raises(ValueError):
        HandType.two_pair(Rank.TWO, Rank.KING)


def test_hand_type_is_immutable():
    t = HandType.quad(Rank.ACE)
    with pytest.raises(AttributeError):
        t.category = HandCategory.HIGH_CARD
