"""
Snake Game Renderer - Pygame-based visualization.

GameRenderer draws the board from a state snapshot. StandaloneRenderer
owns the window and, when a font could be loaded, a TextOverlay for the
score, high score and pause/game-over banners.
"""
import pygame
from pathlib import Path
from typing import Dict, Any, Optional, Sequence, Tuple

from ..core.renderer_interface import RendererInterface


# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 80, 80)
BACKGROUND = (30, 30, 30)
DARK_GRAY = (30, 30, 40)
GRID_COLOR = (50, 50, 60)
WALL_COLOR = (160, 60, 60)
SNAKE_HEAD_COLOR = (0, 255, 0)
SNAKE_BODY_COLOR = (0, 200, 0)
FOOD_COLOR = (220, 50, 50)
TEXT_COLOR = (220, 220, 220)


class GameRenderer(RendererInterface):
    """
    Renders the Snake board using Pygame.

    Draws onto any surface at the configured offset, so it can be used
    for the game window or an off-screen surface.
    """

    def __init__(
        self,
        cell_size: int = 20,
        grid_width: int = 30,
        grid_height: int = 20,
        offset: Tuple[int, int] = (0, 0)
    ):
        """
        Initialize the renderer.

        Args:
            cell_size: Size of each grid cell in pixels
            grid_width: Grid width in cells
            grid_height: Grid height in cells
            offset: (x, y) offset for rendering on the surface
        """
        self._cell_size = cell_size
        self._grid_width = grid_width
        self._grid_height = grid_height
        self._offset_x, self._offset_y = offset

    def get_preferred_size(self) -> Tuple[int, int]:
        """Get the preferred render size."""
        return (self._grid_width * self._cell_size, self._grid_height * self._cell_size)

    def board_rect(self) -> pygame.Rect:
        """Pixel rectangle covered by the grid."""
        width, height = self.get_preferred_size()
        return pygame.Rect(self._offset_x, self._offset_y, width, height)

    def cell_rect(self, x: int, y: int, inset: int = 0) -> pygame.Rect:
        """Pixel rectangle of a grid cell, shrunk by inset on each side."""
        return pygame.Rect(
            self._offset_x + x * self._cell_size + inset,
            self._offset_y + y * self._cell_size + inset,
            self._cell_size - 2 * inset,
            self._cell_size - 2 * inset
        )

    def render(self, game_state: Dict[str, Any], surface: pygame.Surface) -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary containing game state
            surface: Pygame surface to draw on
        """
        width = game_state.get("width", self._grid_width)
        height = game_state.get("height", self._grid_height)

        game_width = width * self._cell_size
        game_height = height * self._cell_size

        # Draw background
        game_rect = pygame.Rect(
            self._offset_x, self._offset_y,
            game_width, game_height
        )
        pygame.draw.rect(surface, DARK_GRAY, game_rect)

        # Draw grid lines (subtle)
        for x in range(width + 1):
            start = (self._offset_x + x * self._cell_size, self._offset_y)
            end = (self._offset_x + x * self._cell_size, self._offset_y + game_height)
            pygame.draw.line(surface, GRID_COLOR, start, end)

        for y in range(height + 1):
            start = (self._offset_x, self._offset_y + y * self._cell_size)
            end = (self._offset_x + game_width, self._offset_y + y * self._cell_size)
            pygame.draw.line(surface, GRID_COLOR, start, end)

        # Deadly edges get a red frame
        if game_state.get("boundary") == "wall":
            pygame.draw.rect(surface, WALL_COLOR, game_rect.inflate(4, 4), width=2)

        # Food disappears only when the board is full
        food = game_state.get("food")
        if food is not None:
            pygame.draw.rect(
                surface, FOOD_COLOR, self.cell_rect(food["x"], food["y"], inset=2),
                border_radius=4
            )

        # Draw snake
        for i, segment in enumerate(game_state["snake"]):
            color = SNAKE_HEAD_COLOR if i == 0 else SNAKE_BODY_COLOR
            border_radius = 6 if i == 0 else 3
            pygame.draw.rect(
                surface, color, self.cell_rect(segment["x"], segment["y"], inset=1),
                border_radius=border_radius
            )

            # Draw eyes on head
            if i == 0:
                self._draw_eyes(surface, segment, game_state.get("direction", 0))

    def _draw_eyes(self, surface: pygame.Surface, head: Dict[str, int], direction: int):
        """Draw eyes on the snake's head."""
        cx = self._offset_x + head["x"] * self._cell_size + self._cell_size // 2
        cy = self._offset_y + head["y"] * self._cell_size + self._cell_size // 2

        eye_radius = max(2, self._cell_size // 8)
        eye_offset = self._cell_size // 4

        # Position eyes based on direction
        if direction == 0:  # RIGHT
            positions = [(cx + 2, cy - eye_offset), (cx + 2, cy + eye_offset)]
        elif direction == 1:  # DOWN
            positions = [(cx - eye_offset, cy + 2), (cx + eye_offset, cy + 2)]
        elif direction == 2:  # LEFT
            positions = [(cx - 2, cy - eye_offset), (cx - 2, cy + eye_offset)]
        else:  # UP
            positions = [(cx - eye_offset, cy - 2), (cx + eye_offset, cy - 2)]

        for pos in positions:
            pygame.draw.circle(surface, WHITE, pos, eye_radius)
            pygame.draw.circle(surface, BLACK, pos, eye_radius // 2)


class TextOverlay:
    """
    Score, high score and banner text.

    Optional: the window works without it when no font is available.
    """

    def __init__(self, font: "pygame.font.Font", banner_font: "pygame.font.Font"):
        self.font = font
        self.banner_font = banner_font

    def draw(self, surface: pygame.Surface, game_state: Dict[str, Any],
             board: pygame.Rect, hud: pygame.Rect):
        """
        Draw the HUD strip and any banner over the board.

        Args:
            surface: Surface to draw on
            game_state: Snapshot from SnakeGame.get_state()
            board: Pixel area of the grid
            hud: Pixel area reserved for the score line
        """
        score_text = self.font.render(f"Score: {game_state['score']}", True, WHITE)
        surface.blit(score_text, (hud.x, hud.centery - score_text.get_height() // 2))

        high_text = self.font.render(
            f"High Score: {game_state.get('high_score', 0)}", True, YELLOW
        )
        surface.blit(
            high_text,
            (hud.right - high_text.get_width(), hud.centery - high_text.get_height() // 2)
        )

        if game_state["game_over"]:
            self._draw_banner(surface, "GAME OVER! Press R to restart", RED, board)
        elif game_state.get("paused"):
            self._draw_banner(surface, "PAUSED - Press Space to continue", YELLOW, board)

    def _draw_banner(self, surface: pygame.Surface, text: str, color, board: pygame.Rect):
        rendered = self.banner_font.render(text, True, color)
        surface.blit(
            rendered,
            (board.centerx - rendered.get_width() // 2,
             board.centery - rendered.get_height() // 2)
        )


def load_text_overlay(
    font_paths: Sequence[str],
    font_size: int = 20,
    use_default_font: bool = True,
) -> Optional[TextOverlay]:
    """
    Build a TextOverlay from the first font that loads.

    Tries each path in order, then pygame's bundled font if allowed.

    Returns:
        The overlay, or None when no font could be loaded
    """
    try:
        pygame.font.init()
    except (pygame.error, NotImplementedError):
        return None

    candidates = [p for p in font_paths if Path(p).is_file()]
    if use_default_font:
        candidates.append(None)

    for path in candidates:
        try:
            font = pygame.font.Font(path, font_size)
            banner_font = pygame.font.Font(path, int(font_size * 1.4))
        except (OSError, pygame.error):
            continue
        return TextOverlay(font, banner_font)

    return None


class StandaloneRenderer(GameRenderer):
    """
    Game renderer with its own window.
    Used for human play mode.
    """

    PADDING = 20
    HUD_HEIGHT = 40

    def __init__(
        self,
        grid_width: int = 30,
        grid_height: int = 20,
        cell_size: int = 20,
        title: str = "Snake Game",
        text_overlay: Optional[TextOverlay] = None
    ):
        """
        Initialize standalone renderer with its own window.

        Args:
            grid_width: Grid width in cells
            grid_height: Grid height in cells
            cell_size: Size of each cell in pixels
            title: Window title
            text_overlay: Text drawing, or None for a text-less window
        """
        super().__init__(cell_size, grid_width, grid_height, (self.PADDING, self.PADDING))

        self.window_width = grid_width * cell_size + self.PADDING * 2
        self.window_height = grid_height * cell_size + self.PADDING * 2 + self.HUD_HEIGHT

        pygame.init()
        self.surface = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption(title)

        self.text_overlay = text_overlay

    def hud_rect(self) -> pygame.Rect:
        """Strip under the board where the scores go."""
        board = self.board_rect()
        return pygame.Rect(board.x, board.bottom + self.PADDING // 2, board.width, self.HUD_HEIGHT)

    def draw_frame(self, game_state: Dict[str, Any]):
        """
        Draw one complete frame and show it.

        Args:
            game_state: Current game state
        """
        self.surface.fill(BACKGROUND)
        self.render(game_state, self.surface)

        if self.text_overlay is not None:
            self.text_overlay.draw(self.surface, game_state, self.board_rect(), self.hud_rect())

        pygame.display.flip()

    def close(self):
        """Close the renderer and pygame."""
        pygame.quit()
