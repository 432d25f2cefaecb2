#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
核心基础组件模块
包含枚举、卡牌、牌组、配置和异常等基础组件
"""

from .types import (
    Suit, Rank, MIN_VALUE, MAX_VALUE, DEFAULT_VALUE, DEFAULT_SUIT,
    HEART, DIAMOND, CLUB, SPADE, get_all_suits, get_all_ranks,
)
from .exceptions import PlayingCardError, InvalidCardError, CardConfigError
from .card import Card
from .deck import Deck, build_deck
from .config import DemoConfig

__all__ = [
    # 枚举类型
    'Suit', 'Rank', 'get_all_suits', 'get_all_ranks',

    # 常量
    'MIN_VALUE', 'MAX_VALUE', 'DEFAULT_VALUE', 'DEFAULT_SUIT',
    'HEART', 'DIAMOND', 'CLUB', 'SPADE',

    # 卡牌相关
    'Card', 'Deck', 'build_deck',

    # 配置相关
    'DemoConfig',

    # 异常类型
    'PlayingCardError', 'InvalidCardError', 'CardConfigError',
]
