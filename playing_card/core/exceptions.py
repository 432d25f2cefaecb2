"""
扑克牌业务异常定义
构造失败向上抛出，由调用方决定是否终止程序
"""

from typing import Any


class PlayingCardError(Exception):
    """扑克牌基础异常类"""
    pass


class InvalidCardError(PlayingCardError, ValueError):
    """无效卡牌异常，点数或花色不在合法范围内"""

    def __init__(self, value: Any, suit: Any):
        self.value = value
        self.suit = suit
        super().__init__(f"无效的卡牌: value={value!r}, suit={suit!r}")


class CardConfigError(PlayingCardError, ValueError):
    """配置错误异常"""
    pass
