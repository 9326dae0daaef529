"""
Grid primitives: cell positions and movement directions.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Tuple


class Direction(IntEnum):
    """Snake movement directions."""
    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3

    @property
    def opposite(self) -> "Direction":
        """The direction pointing the other way."""
        return Direction((self + 2) % 4)

    @property
    def vector(self) -> Tuple[int, int]:
        """Unit step (dx, dy); y grows downwards."""
        return _VECTORS[self]


_VECTORS = {
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
}


@dataclass(frozen=True)
class Point:
    """A point on the game grid."""
    x: int
    y: int

    def moved(self, direction: Direction) -> "Point":
        """Neighbouring point one cell away in the given direction."""
        dx, dy = direction.vector
        return Point(self.x + dx, self.y + dy)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}
