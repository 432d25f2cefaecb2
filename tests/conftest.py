"""
pytest配置文件

提供卡牌测试共用的fixture。
"""

import pytest

from playing_card.core import Card, Deck, Suit


INVALID_VALUES = [0, 14, -1, 100, True, False, 1.0, "1", None]
INVALID_SUITS = ["H", "hearts", "", "♥♥", "♡", 0x2665, None, 1]


@pytest.fixture
def ace_of_hearts():
    """红桃A"""
    return Card(1, Suit.HEARTS)


@pytest.fixture
def ten_of_spades():
    """黑桃10"""
    return Card(10, Suit.SPADES)


@pytest.fixture
def five_of_clubs():
    return Card(5, Suit.CLUBS)


@pytest.fixture
def deck():
    """有序的52张牌"""
    return Deck()


@pytest.fixture(params=INVALID_VALUES, ids=repr)
def invalid_value(request):
    return request.param


@pytest.fixture(params=INVALID_SUITS, ids=repr)
def invalid_suit(request):
    return request.param
