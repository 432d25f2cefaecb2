"""Command line deck demo.

Provides the renderer and the entry point that prints a full deck.
"""

from .render import CardRenderer
from .deck_demo import main, run

__all__ = ['CardRenderer', 'main', 'run']
