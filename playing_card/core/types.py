"""
扑克牌相关类型定义.

定义扑克牌的花色、点数等基础枚举类型及默认值.
"""

from enum import Enum, IntEnum
from typing import List


class Suit(Enum):
    """
    扑克牌花色枚举.

    定义四种标准扑克牌花色，使用Unicode符号表示.
    """

    HEARTS = "♥"      # 红桃 ♥
    DIAMONDS = "♦"    # 方块 ♦
    CLUBS = "♣"       # 梅花 ♣
    SPADES = "♠"      # 黑桃 ♠

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """返回花色符号"""
        return self.value


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    数值即卡牌的存储值: A为1，J/Q/K分别为11/12/13.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return self.label

    @property
    def label(self) -> str:
        """返回牌面上印刷的点数 (A, 2-10, J, Q, K)"""
        return _FACE_LABELS.get(self, str(self.value))


_FACE_LABELS = {
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

MIN_VALUE = Rank.ACE.value
MAX_VALUE = Rank.KING.value

DEFAULT_VALUE = Rank.ACE.value
DEFAULT_SUIT = Suit.HEARTS

HEART = Suit.HEARTS
DIAMOND = Suit.DIAMONDS
CLUB = Suit.CLUBS
SPADE = Suit.SPADES


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 按 ♥ ♦ ♣ ♠ 顺序排列的四种花色
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 从A到K的13种点数
    """
    return list(Rank)
