"""
Snake Game Core - Pure game logic without rendering.

The state machine is driven from outside: input calls
set_pending_direction()/toggle_pause()/reset(), a timer calls tick(),
and the renderer reads get_state(). No I/O happens here; a new high
score is handed to the on_high_score hook for persistence.
"""
import random
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from ..core.game_interface import GameInterface
from .food import place_food
from .point import Direction, Point


class BoundaryPolicy(Enum):
    """What happens when the snake reaches a grid edge."""
    WRAP = "wrap"   # edges are joined (toroidal grid)
    WALL = "wall"   # crossing an edge ends the game


class SnakeGame(GameInterface):
    """
    Core Snake game logic.

    The snake moves one cell per tick and grows by one segment for each
    food eaten. The game ends when the head runs into the body, or into
    a wall under BoundaryPolicy.WALL. The high score survives reset().
    """

    def __init__(
        self,
        width: int = 30,
        height: int = 20,
        boundary: BoundaryPolicy = BoundaryPolicy.WRAP,
        high_score: int = 0,
        rng: Optional[random.Random] = None,
        on_high_score: Optional[Callable[[int], None]] = None,
        initial_length: int = 3,
    ):
        """
        Initialize the game.

        Args:
            width: Grid width in cells
            height: Grid height in cells
            boundary: Edge behaviour (wrap-around or wall death)
            high_score: Previously persisted high score
            rng: Random source for food placement
            on_high_score: Called with the new value whenever the high score rises
            initial_length: Number of segments after reset
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")
        if not 1 <= initial_length <= width // 2 + 1:
            raise ValueError(
                f"initial_length {initial_length} does not fit a grid {width} cells wide"
            )
        if high_score < 0:
            raise ValueError(f"high_score must be non-negative, got {high_score}")

        self.width = width
        self.height = height
        self.boundary = boundary
        self.initial_length = initial_length
        self.rng = rng if rng is not None else random.Random()
        self.on_high_score = on_high_score

        # Game state (initialized in reset)
        self.direction: Direction = Direction.RIGHT
        self.pending_direction: Direction = Direction.RIGHT
        self.snake: List[Point] = []
        self.food: Optional[Point] = None
        self.score: int = 0
        self.high_score: int = high_score
        self.frame_count: int = 0
        self.game_over: bool = False
        self.paused: bool = False

        self.reset()

    @property
    def head(self) -> Point:
        return self.snake[0]

    def reset(self) -> Dict[str, Any]:
        """
        Start a new round. The high score is kept.

        Returns:
            Dictionary containing the initial game state
        """
        # Start in center, body trailing to the left
        center_x = self.width // 2
        center_y = self.height // 2

        self.direction = Direction.RIGHT
        self.pending_direction = Direction.RIGHT
        self.snake = [Point(center_x - i, center_y) for i in range(self.initial_length)]
        self.score = 0
        self.frame_count = 0
        self.game_over = False
        self.paused = False

        self._place_food()

        return self.get_state()

    def set_pending_direction(self, direction: Direction) -> bool:
        """
        Buffer the direction to apply on the next tick.

        Reversing onto the current direction is ignored, as is any input
        while the game is over or paused. Later inputs overwrite earlier
        ones until the next tick.

        Returns:
            True if the direction was accepted
        """
        if self.game_over or self.paused:
            return False
        if direction == self.direction.opposite:
            return False
        self.pending_direction = direction
        return True

    def toggle_pause(self) -> bool:
        """Flip the paused flag (no effect after game over)."""
        if not self.game_over:
            self.paused = not self.paused
        return self.paused

    def tick(self) -> Dict[str, Any]:
        """
        Advance the snake by one cell.

        Returns:
            Game state after the step
        """
        if self.game_over or self.paused:
            return self.get_state()

        self.frame_count += 1
        self.direction = self.pending_direction
        candidate = self.head.moved(self.direction)

        if self.boundary is BoundaryPolicy.WRAP:
            candidate = Point(candidate.x % self.width, candidate.y % self.height)
        elif not self._in_bounds(candidate):
            self._end_game()
            return self.get_state()

        # The tail still counts: it only moves after the head is placed
        if candidate in self.snake:
            self._end_game()
            return self.get_state()

        self.snake.insert(0, candidate)

        if candidate == self.food:
            self.score += 1
            self._update_high_score()
            self._place_food()
        else:
            self.snake.pop()  # Remove tail

        return self.get_state()

    def _in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def _end_game(self):
        self.game_over = True
        self._update_high_score()

    def _update_high_score(self):
        """Raise the high score to the current score and report it."""
        if self.score > self.high_score:
            self.high_score = self.score
            if self.on_high_score is not None:
                self.on_high_score(self.high_score)

    def _place_food(self):
        """Place food at random location not on snake."""
        if len(self.snake) >= self.width * self.height:
            # Board is full: nothing left to eat
            self.food = None
            self._end_game()
            return
        self.food = place_food(self.snake, self.width, self.height, self.rng)

    def get_state(self) -> Dict[str, Any]:
        """
        Get a snapshot of the current game state for rendering.

        The snapshot is a fresh dictionary; changing it does not affect the game.
        """
        return {
            "snake": [p.to_dict() for p in self.snake],
            "food": self.food.to_dict() if self.food is not None else None,
            "direction": int(self.direction),
            "score": self.score,
            "high_score": self.high_score,
            "game_over": self.game_over,
            "paused": self.paused,
            "frame": self.frame_count,
            "width": self.width,
            "height": self.height,
            "boundary": self.boundary.value,
        }
