"""牌组CLI渲染模块.

负责把卡牌序列渲染为命令行输出文本，不直接写控制台。
"""

from typing import Iterable, List

from playing_card.core import Card


class CardRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，仅依赖传入的卡牌。
    """

    @staticmethod
    def render_compact(cards: Iterable[Card]) -> List[str]:
        """每张牌一行，如 "A ♥"."""
        return [card.to_str() for card in cards]

    @staticmethod
    def render_art(cards: Iterable[Card]) -> List[str]:
        """每张牌一个7行字符画块."""
        return [card.to_art() for card in cards]

    @staticmethod
    def render(cards: Iterable[Card], art: bool = False) -> List[str]:
        """按配置选择渲染方式.

        Args:
            cards: 要渲染的卡牌
            art: 为True时渲染字符画

        Returns:
            输出块列表，每块单独打印一次
        """
        if art:
            return CardRenderer.render_art(cards)
        return CardRenderer.render_compact(cards)
