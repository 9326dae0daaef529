"""
Food placement - pick a random grid cell the snake does not occupy.
"""
import random
from typing import Iterable, Optional

from .point import Point


def place_food(
    snake: Iterable[Point],
    width: int,
    height: int,
    rng: random.Random,
) -> Point:
    """
    Sample uniform random cells until one is not covered by the snake.

    The snake must leave at least one free cell (len(snake) < width * height).

    Args:
        snake: Snake segments, in any order
        width: Grid width in cells
        height: Grid height in cells
        rng: Random source (inject a seeded one for deterministic play)

    Returns:
        Free cell for the food

    Raises:
        ValueError: If the snake covers every cell of the grid
    """
    occupied = set(snake)
    if len(occupied) >= width * height:
        raise ValueError(
            f"No free cell for food: snake covers all {width * height} cells"
        )

    while True:
        food = Point(rng.randrange(width), rng.randrange(height))
        if food not in occupied:
            return food


class FoodPlacer:
    """Places food with its own random source."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def place(self, snake: Iterable[Point], width: int, height: int) -> Point:
        """Return a free cell for the food (see place_food)."""
        return place_food(snake, width, height, self.rng)
