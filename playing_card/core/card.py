"""
扑克牌数据结构.

定义可变的Card类: 构造时严格校验，修改只能通过带校验的setter完成，
任何时刻点数都在1-13之间，花色都是四种合法花色之一.
"""

import logging
from typing import Any, Optional, TextIO, Union

from .exceptions import InvalidCardError
from .types import Suit, Rank, MIN_VALUE, MAX_VALUE, DEFAULT_VALUE, DEFAULT_SUIT

logger = logging.getLogger(__name__)

SuitLike = Union[Suit, str]

# 卡面内部宽度（不含左右边框）
_ART_INNER_WIDTH = 9


def _checked_value(value: Any) -> Optional[int]:
    """返回合法的点数，非法时返回None"""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if MIN_VALUE <= value <= MAX_VALUE:
        return int(value)
    return None


def _checked_suit(suit: Any) -> Optional[Suit]:
    """接受Suit成员或其Unicode符号，非法时返回None"""
    if isinstance(suit, Suit):
        return suit
    if isinstance(suit, str):
        try:
            return Suit(suit)
        except ValueError:
            return None
    return None


class Card:
    """
    表示标准52张牌中的一张.

    Attributes:
        value: 点数 (1-13)，1为A，11/12/13为J/Q/K
        suit: 花色

    Examples:
        >>> card = Card(10, Suit.SPADES)
        >>> str(card)
        '10 ♠'
        >>> card.set_value(14)
        False
        >>> card.value
        10
    """

    def __init__(self, value: int = DEFAULT_VALUE, suit: SuitLike = DEFAULT_SUIT) -> None:
        """
        创建卡牌，不带参数时为红桃A.

        Args:
            value: 点数 (1-13)，不是牌面显示的A/J/Q/K
            suit: 花色，Suit成员或 ♥ ♦ ♣ ♠ 之一

        Raises:
            InvalidCardError: 当点数或花色无效时
        """
        checked_value = _checked_value(value)
        checked_suit = _checked_suit(suit)
        if checked_value is None or checked_suit is None:
            raise InvalidCardError(value, suit)

        self._value = checked_value
        self._suit = checked_suit

    @classmethod
    def default(cls) -> 'Card':
        """返回默认卡牌 (A ♥)"""
        return cls()

    @classmethod
    def try_create(cls, value: Any, suit: Any) -> Optional['Card']:
        """
        尝试创建卡牌.

        Returns:
            Optional[Card]: 参数合法时返回新卡牌，否则返回None
        """
        try:
            return cls(value, suit)
        except InvalidCardError as e:
            logger.debug("卡牌创建失败: %s", e)
            return None

    @classmethod
    def copy_of(cls, original: 'Card') -> 'Card':
        """
        复制卡牌，新对象与原对象互不影响.

        Args:
            original: 被复制的卡牌
        """
        return cls(original.value, original.suit)

    def copy(self) -> 'Card':
        """返回当前卡牌的独立副本"""
        return Card.copy_of(self)

    def __copy__(self) -> 'Card':
        return self.copy()

    def __deepcopy__(self, memo: dict) -> 'Card':
        return self.copy()

    # ---- setters ----

    def set_value(self, value: int) -> bool:
        """
        设置点数，非法时保持不变.

        Returns:
            bool: 点数在1-13之间并已修改时返回True
        """
        checked_value = _checked_value(value)
        if checked_value is None:
            logger.debug("拒绝无效点数: %r", value)
            return False
        self._value = checked_value
        return True

    def set_suit(self, suit: SuitLike) -> bool:
        """
        设置花色，非法时保持不变.

        Returns:
            bool: 花色合法并已修改时返回True
        """
        checked_suit = _checked_suit(suit)
        if checked_suit is None:
            logger.debug("拒绝无效花色: %r", suit)
            return False
        self._suit = checked_suit
        return True

    def set_all(self, value: int, suit: SuitLike) -> bool:
        """
        同时设置点数和花色.

        两者都合法时才会修改；任意一个非法则都不修改.

        Returns:
            bool: 修改成功时返回True
        """
        checked_value = _checked_value(value)
        checked_suit = _checked_suit(suit)
        if checked_value is None or checked_suit is None:
            logger.debug("拒绝无效卡牌数据: value=%r, suit=%r", value, suit)
            return False
        self._value = checked_value
        self._suit = checked_suit
        return True

    # ---- getters ----

    @property
    def value(self) -> int:
        """点数 (1-13)，显示用的点数见 print_value"""
        return self._value

    @property
    def suit(self) -> Suit:
        """花色"""
        return self._suit

    @property
    def rank(self) -> Rank:
        return Rank(self._value)

    @property
    def print_value(self) -> str:
        """牌面显示的点数 (A, 2-10, J, Q, K)"""
        return self.rank.label

    def get_print_value(self) -> str:
        return self.print_value

    # ---- rendering ----

    def to_str(self) -> str:
        """
        返回卡牌的简短字符串表示.
        例如: "A ♥", "10 ♠"
        """
        return f"{self.print_value} {self._suit.value}"

    def to_art(self) -> str:
        """
        返回卡牌的字符画，共7行，末尾没有换行符.

        单字符点数补一个空格，使其与"10"对齐.
        """
        print_value = self.print_value.ljust(2)
        border = "─" * _ART_INNER_WIDTH
        blank = "│" + " " * _ART_INNER_WIDTH + "│"
        lines = [
            f"┌{border}┐",
            f"│ {print_value}      │",
            blank,
            f"│    {self._suit.value}    │",
            blank,
            f"│      {print_value} │",
            f"└{border}┘",
        ]
        return "\n".join(lines)

    def print_card(self, file: Optional[TextIO] = None) -> None:
        """把字符画输出到控制台 (默认stdout)"""
        print(self.to_art(), file=file)

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        """返回卡牌的调试表示"""
        return f"Card({self.rank.name}, {self._suit.name})"

    def __eq__(self, other: object) -> bool:
        """点数和花色都相同时相等"""
        if not isinstance(other, Card):
            return NotImplemented
        return self._value == other._value and self._suit == other._suit

    # 可变对象，不可哈希
    __hash__ = None  # type: ignore[assignment]
