import pytest

from poker_showdown.env import HandCategory
from poker_showdown.evaluation import SimulationStats, parse_threshold, simulate


def test_counts_add_up():
    stats = simulate(200, seed=3, progress=False)
    assert stats.rounds == 200
    assert stats.wins + stats.losses + stats.ties == 200
    assert stats.category_counts.sum() == 200
    assert 0.0 <= stats.win_rate <= 1.0


def test_seeded_runs_match():
    a = simulate(100, seed=11, progress=False)
    b = simulate(100, seed=11, progress=False)
    assert (a.wins, a.losses, a.ties, a.notable) == (b.wins, b.losses, b.ties, b.notable)
    assert (a.category_counts == b.category_counts).all()


def test_notable_matches_category_counts():
    stats = simulate(300, seed=8, threshold="two pair", progress=False)
    assert stats.threshold == HandCategory.TWO_PAIR
    assert stats.notable == stats.category_counts[HandCategory.TWO_PAIR:].sum()


def test_on_notable_callback():
    seen = []
    stats = simulate(300, seed=8, threshold=HandCategory.TRIP, progress=False, on_notable=seen.append)
    assert len(seen) == stats.notable
    assert all(r.type_a.category >= HandCategory.TRIP for r in seen)


def test_zero_rounds():
    stats = simulate(0, progress=False)
    assert stats.rounds == 0
    assert stats.win_rate == 0.0 and stats.notable_rate == 0.0
    assert "Rounds: 0" in stats.summary()


def test_negative_rounds_rejected():
    with pytest.raises(ValueError):
        simulate(-1, progress=False)


@pytest.mark.parametrize("value,expected", [
    ("FULL_HOUSE", HandCategory.FULL_HOUSE),
    ("full house", HandCategory.FULL_HOUSE),
    ("straight-flush", HandCategory.STRAIGHT_FLUSH),
    (HandCategory.FLUSH, HandCategory.FLUSH),
    (3, HandCategory.TRIP),
])
def test_parse_threshold(value, expected):
    assert parse_threshold(value) == expected


def test_parse_threshold_rejects_unknown():
    with pytest.raises(ValueError):
        parse_threshold("royal")


def test_summary_lists_every_category():
    text = SimulationStats().summary()
    for label in ("High Card", "One Pair", "Straight Flush", "Full House or better"):
        assert label in text
