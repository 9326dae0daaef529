"""
Pytest configuration and fixtures for Grid Snake tests.

pygame runs headless: SDL is pointed at its dummy video and audio drivers
before anything imports pygame, so window tests work without a display.
"""

import os
import random
import sys
from pathlib import Path

import pytest


os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


class FakeRenderer:
    """Records frames instead of drawing them."""

    def __init__(self):
        self.frames = []
        self.closed = False
        self.text_overlay = None

    def draw_frame(self, game_state):
        self.frames.append(game_state)

    def close(self):
        self.closed = True


@pytest.fixture
def rng():
    """Seeded random source for reproducible food placement."""
    return random.Random(1234)


@pytest.fixture
def make_game(rng):
    """Factory for SnakeGame instances with a seeded RNG."""
    from gridsnake.game.snake_game import SnakeGame

    def _make(**kwargs):
        kwargs.setdefault("rng", rng)
        return SnakeGame(**kwargs)

    return _make


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def fake_renderer():
    return FakeRenderer()


@pytest.fixture
def high_score_path(tmp_path):
    """Path for a high score file that does not exist yet."""
    return tmp_path / "highscore.txt"


@pytest.fixture
def sample_config():
    """Provide sample configuration for tests."""
    return {
        'game': {
            'grid_width': 12,
            'grid_height': 8,
            'boundary': 'wall',
            'move_delay_ms': 150,
        },
        'display': {
            'cell_size': 16,
            'font_paths': [],
            'use_default_font': False,
        },
        'high_score': {
            'file': 'scores.txt',
        },
    }
