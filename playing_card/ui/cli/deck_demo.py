"""牌组演示程序.

生成有序的52张牌并逐张打印到标准输出。
"""

import argparse
import logging
from typing import List, Optional, TextIO

from playing_card.core import Deck, DemoConfig, InvalidCardError, CardConfigError
from playing_card.core.config import LOG_LEVELS
from .render import CardRenderer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """创建命令行参数解析器."""
    parser = argparse.ArgumentParser(
        prog="playing-card-demo",
        description="Build a standard 52-card deck and print every card.",
    )
    parser.add_argument(
        "--art", action="store_true",
        help="print each card as a box drawing instead of a one-line label",
    )
    parser.add_argument(
        "--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS,
        help="logging level (default: WARNING)",
    )
    return parser


def run(config: DemoConfig, out: Optional[TextIO] = None) -> int:
    """生成牌组并输出.

    Args:
        config: 演示配置
        out: 输出流，默认stdout

    Returns:
        进程退出码: 成功为0，牌组生成失败为1
    """
    try:
        deck = Deck()
    except InvalidCardError as e:
        logger.error("无法生成牌组: %s", e)
        return 1

    logger.info("牌组共%d张牌", len(deck))
    for block in CardRenderer.render(deck, art=config.art):
        print(block, file=out)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """牌组演示主入口."""
    args = build_parser().parse_args(argv)
    try:
        config = DemoConfig.from_args(args)
    except CardConfigError as e:
        logger.error("配置错误: %s", e)
        return 2

    logging.basicConfig(level=config.log_level, format='%(message)s')
    return run(config)
