"""
扑克牌组管理.

定义Deck类，按固定顺序持有标准52张牌: 先花色 (♥ ♦ ♣ ♠)，
同一花色内点数从A到K. 不支持洗牌和发牌.
"""

import logging
from typing import Iterator, List

from .card import Card
from .types import get_all_suits, get_all_ranks

logger = logging.getLogger(__name__)

DECK_SIZE = 52


def build_deck() -> List[Card]:
    """
    生成有序的52张牌.

    Returns:
        List[Card]: ♥A..♥K, ♦A..♦K, ♣A..♣K, ♠A..♠K

    Raises:
        InvalidCardError: 当某张牌无法创建时
    """
    cards = [
        Card(rank.value, suit)
        for suit in get_all_suits()
        for rank in get_all_ranks()
    ]
    logger.debug("已生成%d张牌", len(cards))
    return cards


class Deck:
    """
    表示一副有序的扑克牌.

    Examples:
        >>> deck = Deck()
        >>> len(deck)
        52
        >>> str(deck[0])
        'A ♥'
    """

    def __init__(self) -> None:
        self._cards: List[Card] = []
        self._reset_deck()

    def _reset_deck(self) -> None:
        """重置牌组为完整的52张牌."""
        self._cards = build_deck()

    def reset(self) -> None:
        """重置牌组，丢弃对牌的所有修改."""
        self._reset_deck()

    @property
    def cards(self) -> List[Card]:
        """返回牌列表的浅拷贝"""
        return list(self._cards)

    def __len__(self) -> int:
        """返回牌组中的牌数"""
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards)"

    def __repr__(self) -> str:
        """返回牌组的调试表示"""
        return f"Deck(cards={len(self._cards)})"
