"""
Playing card value type and 52-card deck demo.

Core objects are re-exported here for convenience.
"""

from .core import (
    Suit, Rank, Card, Deck, build_deck, DemoConfig,
    PlayingCardError, InvalidCardError, CardConfigError,
    DEFAULT_VALUE, DEFAULT_SUIT, HEART, DIAMOND, CLUB, SPADE,
)

__version__ = "1.0.0"

__all__ = [
    'Suit', 'Rank', 'Card', 'Deck', 'build_deck', 'DemoConfig',
    'PlayingCardError', 'InvalidCardError', 'CardConfigError',
    'DEFAULT_VALUE', 'DEFAULT_SUIT', 'HEART', 'DIAMOND', 'CLUB', 'SPADE',
]
