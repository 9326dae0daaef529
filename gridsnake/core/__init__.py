"""
Core abstractions for Grid Snake.

Provides the interfaces the game state machine and renderers implement.
"""

from .game_interface import GameInterface
from .renderer_interface import RendererInterface

__all__ = [
    'GameInterface',
    'RendererInterface',
]
