import pytest

from poker_showdown.env import make_rng


@pytest.fixture
def rng():
    return make_rng(1234)
