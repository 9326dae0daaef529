"""
Play Session - the cooperative game loop for human play.

Each frame: poll input, tick the game when the move timer fires, draw.
The window, frame clock and move timer are fields of GameSession rather
than module globals, so the loop can be driven step by step in tests.
"""
import time
from typing import Callable, Dict, Optional

import pygame

from .high_score import HighScoreStore
from .input import ACTION_DIRECTIONS, InputAction, default_key_bindings, translate_event
from .renderer import StandaloneRenderer, load_text_overlay
from .snake_game import BoundaryPolicy, SnakeGame
from ..utils.config_loader import Config, load_config
from ..visualization.terminal_display import (
    SessionStats,
    print_controls,
    print_game_over,
    print_session_summary,
)


class MoveTimer:
    """
    Fires once every delay_ms of wall time.

    Re-armed only when it fires (or on restart()), so the snake speed
    does not depend on the frame rate.
    """

    def __init__(self, delay_ms: int, clock: Callable[[], float] = time.monotonic):
        self.delay = delay_ms / 1000.0
        self.clock = clock
        self.last_fire = clock()

    def ready(self) -> bool:
        """True if the delay has elapsed; re-arms the timer when it is."""
        now = self.clock()
        if now - self.last_fire >= self.delay:
            self.last_fire = now
            return True
        return False

    def restart(self):
        self.last_fire = self.clock()


class GameSession:
    """
    Owns one play session: the game, its window and its timers.
    """

    def __init__(
        self,
        game: SnakeGame,
        renderer: StandaloneRenderer,
        move_delay_ms: int = 100,
        fps: int = 60,
        timer: Optional[MoveTimer] = None,
        frame_clock: Optional["pygame.time.Clock"] = None,
        key_bindings: Optional[Dict[int, InputAction]] = None,
    ):
        """
        Initialize the session.

        Args:
            game: Game state machine to drive
            renderer: Window renderer
            move_delay_ms: Time between snake moves
            fps: Frame rate limit for drawing
            timer: Move timer (defaults to a monotonic-clock MoveTimer)
            frame_clock: Frame limiter (defaults to pygame.time.Clock())
            key_bindings: Key code to action table
        """
        self.game = game
        self.renderer = renderer
        self.fps = fps
        self.timer = timer or MoveTimer(move_delay_ms)
        self.frame_clock = frame_clock or pygame.time.Clock()
        self.key_bindings = key_bindings or default_key_bindings()

        self.stats = SessionStats(high_score=game.high_score)
        self.running = False
        self._round_start_high_score = game.high_score

    def handle_action(self, action: InputAction):
        """Apply one input signal to the session."""
        if action is InputAction.QUIT:
            self.running = False
        elif action is InputAction.RESTART:
            # A round abandoned after setting a record still counts
            if not self.game.game_over and self.game.high_score > self._round_start_high_score:
                self._finish_round()
            self.game.reset()
            self.timer.restart()
            self._round_start_high_score = self.game.high_score
        elif action is InputAction.PAUSE:
            self.game.toggle_pause()
        else:
            self.game.set_pending_direction(ACTION_DIRECTIONS[action])

    def update(self) -> bool:
        """
        Tick the game if the move timer fired.

        Returns:
            True if a tick happened
        """
        if not self.timer.ready():
            return False

        was_over = self.game.game_over
        self.game.tick()
        if self.game.game_over and not was_over:
            self._finish_round()
        return True

    def _finish_round(self):
        score = self.game.score
        new_record = self.game.high_score > self._round_start_high_score
        self.stats.record_game(score, self.game.high_score, new_record)
        print_game_over(score, self.game.high_score, new_record)

    def process_events(self):
        """Drain the pygame event queue."""
        for event in pygame.event.get():
            action = translate_event(event, self.key_bindings)
            if action is not None:
                self.handle_action(action)

    def step_frame(self):
        """One iteration of the main loop."""
        self.process_events()
        self.update()
        self.renderer.draw_frame(self.game.get_state())
        self.frame_clock.tick(self.fps)

    def run(self) -> int:
        """
        Run until the window is closed.

        Returns:
            Process exit code
        """
        self.running = True
        self.timer.restart()
        try:
            while self.running:
                self.step_frame()
        finally:
            self.renderer.close()

        print_session_summary(self.stats)
        return 0


def build_session(config: Config) -> GameSession:
    """
    Wire the game, high score file, window and text overlay from config.
    """
    store = HighScoreStore(config.high_score.file)

    game = SnakeGame(
        width=config.game.grid_width,
        height=config.game.grid_height,
        boundary=BoundaryPolicy(config.game.boundary),
        high_score=store.load(),
        on_high_score=store.save,
        initial_length=config.game.initial_length,
    )

    renderer = StandaloneRenderer(
        grid_width=config.game.grid_width,
        grid_height=config.game.grid_height,
        cell_size=config.display.cell_size,
        title=config.display.title,
    )
    renderer.text_overlay = load_text_overlay(
        config.display.font_paths,
        config.display.font_size,
        config.display.use_default_font,
    )
    if renderer.text_overlay is None:
        print("[Display] No font available, playing without text")

    return GameSession(
        game,
        renderer,
        move_delay_ms=config.game.move_delay_ms,
        fps=config.display.fps,
    )


def main() -> int:
    """Entry point for human play mode."""
    config = load_config()
    session = build_session(config)

    print_controls(config.display.title, config.game.boundary, session.game.high_score)

    return session.run()
