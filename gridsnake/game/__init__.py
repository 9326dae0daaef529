"""
Snake game module for Grid Snake.

The rules live in snake_game/food/point and need no pygame; input,
renderer and session are the pygame-facing collaborators.
"""

from .point import Direction, Point
from .food import FoodPlacer, place_food
from .snake_game import BoundaryPolicy, SnakeGame
from .high_score import HighScoreStore

__all__ = [
    'Direction',
    'Point',
    'FoodPlacer',
    'place_food',
    'BoundaryPolicy',
    'SnakeGame',
    'HighScoreStore',
]
