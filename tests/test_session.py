"""
Tests for the play session: move timer, input handling and the main loop.
"""

from unittest.mock import MagicMock

import pygame
import pytest

from gridsnake.game.input import InputAction, default_key_bindings, translate_event
from gridsnake.game.point import Direction, Point
from gridsnake.game.session import GameSession, MoveTimer
from gridsnake.game.snake_game import BoundaryPolicy
from gridsnake.visualization.terminal_display import SessionStats


@pytest.fixture
def session(make_game, fake_renderer, fake_clock):
    """Session around a default game with a manual clock and no window."""
    game = make_game()
    game.food = Point(0, 0)
    return GameSession(
        game,
        fake_renderer,
        timer=MoveTimer(100, clock=fake_clock),
        frame_clock=MagicMock(),
    )


class TestMoveTimer:
    """Tests for the fixed-cadence tick gate."""

    def test_not_ready_before_delay(self, fake_clock):
        timer = MoveTimer(100, clock=fake_clock)
        fake_clock.advance(0.05)

        assert timer.ready() is False

    def test_ready_after_delay(self, fake_clock):
        timer = MoveTimer(100, clock=fake_clock)
        fake_clock.advance(0.25)

        assert timer.ready() is True

    def test_rearmed_only_when_fired(self, fake_clock):
        """Test frames that do not fire leave the countdown running."""
        timer = MoveTimer(100, clock=fake_clock)

        fake_clock.advance(0.06)
        assert timer.ready() is False
        fake_clock.advance(0.06)
        assert timer.ready() is True
        fake_clock.advance(0.06)
        assert timer.ready() is False

    def test_restart(self, fake_clock):
        timer = MoveTimer(100, clock=fake_clock)
        fake_clock.advance(0.08)
        timer.restart()
        fake_clock.advance(0.05)

        assert timer.ready() is False


class TestInputTranslation:
    """Tests for turning pygame events into actions."""

    @pytest.mark.parametrize("key, action", [
        (pygame.K_UP, InputAction.UP),
        (pygame.K_a, InputAction.LEFT),
        (pygame.K_s, InputAction.DOWN),
        (pygame.K_RIGHT, InputAction.RIGHT),
        (pygame.K_SPACE, InputAction.PAUSE),
        (pygame.K_r, InputAction.RESTART),
        (pygame.K_ESCAPE, InputAction.QUIT),
    ])
    def test_key_bindings(self, key, action):
        event = pygame.event.Event(pygame.KEYDOWN, key=key)

        assert translate_event(event) == action

    def test_window_close(self):
        assert translate_event(pygame.event.Event(pygame.QUIT)) == InputAction.QUIT

    def test_unbound_key(self):
        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_z)

        assert translate_event(event) is None

    def test_other_events_ignored(self):
        event = pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1), rel=(0, 0), buttons=(0, 0, 0))

        assert translate_event(event) is None

    def test_custom_bindings(self):
        bindings = default_key_bindings()
        bindings[pygame.K_z] = InputAction.RESTART
        event = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_z)

        assert translate_event(event, bindings) == InputAction.RESTART


class TestSessionActions:
    """Tests for GameSession.handle_action()."""

    def test_direction_action(self, session):
        session.handle_action(InputAction.UP)

        assert session.game.pending_direction == Direction.UP

    def test_reverse_action_ignored(self, session):
        session.handle_action(InputAction.LEFT)

        assert session.game.pending_direction == Direction.RIGHT

    def test_pause_action(self, session):
        session.handle_action(InputAction.PAUSE)
        assert session.game.paused is True

        session.handle_action(InputAction.PAUSE)
        assert session.game.paused is False

    def test_restart_action(self, session, fake_clock):
        """Test restart resets the game and re-arms the move timer."""
        session.game.score = 4
        session.game.game_over = True
        fake_clock.advance(1.0)

        session.handle_action(InputAction.RESTART)

        assert session.game.score == 0
        assert session.game.game_over is False
        assert session.update() is False

    def test_restart_after_record_counts_round(self, session, fake_clock):
        """Test abandoning a record-setting round still records it."""
        game = session.game
        game.food = game.head.moved(Direction.RIGHT)
        fake_clock.advance(0.2)
        session.update()

        session.handle_action(InputAction.RESTART)

        assert session.stats.games_played == 1
        assert session.stats.new_records == 1
        assert session.stats.best_score == 1

    def test_restart_without_record_not_counted(self, session):
        session.handle_action(InputAction.RESTART)

        assert session.stats.games_played == 0

    def test_quit_action(self, session):
        session.running = True

        session.handle_action(InputAction.QUIT)

        assert session.running is False


class TestSessionLoop:
    """Tests for update(), step_frame() and run()."""

    def test_update_ticks_on_cadence(self, session, fake_clock):
        """Test the snake moves once per delay regardless of frame count."""
        for _ in range(5):
            fake_clock.advance(0.03)
            session.update()

        assert session.game.head == Point(16, 10)

    def test_step_frame_draws_snapshot(self, session, fake_renderer, fake_clock, monkeypatch):
        monkeypatch.setattr(session, "process_events", lambda: None)
        fake_clock.advance(0.2)

        session.step_frame()

        assert len(fake_renderer.frames) == 1
        assert fake_renderer.frames[0]["snake"][0] == {"x": 16, "y": 10}
        session.frame_clock.tick.assert_called_once_with(60)

    def test_game_over_recorded_once(self, make_game, fake_renderer, fake_clock):
        """Test a finished round is counted once in the session stats."""
        game = make_game(boundary=BoundaryPolicy.WALL)
        game.snake = [Point(29, 10), Point(28, 10), Point(27, 10)]
        game.food = Point(0, 0)
        session = GameSession(game, fake_renderer, timer=MoveTimer(100, clock=fake_clock),
                              frame_clock=MagicMock())

        for _ in range(3):
            fake_clock.advance(0.2)
            session.update()

        assert game.game_over is True
        assert session.stats.games_played == 1
        assert session.stats.new_records == 0

    def test_new_record_counted(self, session, fake_clock):
        game = session.game
        game.food = game.head.moved(Direction.RIGHT)
        fake_clock.advance(0.2)
        session.update()
        game.set_pending_direction(Direction.UP)
        game.snake = [game.head, Point(game.head.x, game.head.y - 1)] + game.snake[1:]

        fake_clock.advance(0.2)
        session.update()

        assert game.game_over is True
        assert session.stats.new_records == 1
        assert session.stats.high_score == 1

    def test_run_until_quit(self, session, fake_renderer, monkeypatch):
        """Test run() stops on QUIT, closes the window and exits with 0."""
        monkeypatch.setattr(
            session, "process_events", lambda: session.handle_action(InputAction.QUIT)
        )

        assert session.run() == 0
        assert fake_renderer.closed is True
        assert len(fake_renderer.frames) == 1


class TestSessionStats:
    """Tests for the session summary numbers."""

    def test_record_game(self):
        stats = SessionStats()

        stats.record_game(3, 3, True)
        stats.record_game(1, 3, False)

        assert stats.games_played == 2
        assert stats.best_score == 3
        assert stats.average_score == 2.0
        assert stats.new_records == 1

    def test_empty_average(self):
        assert SessionStats().average_score == 0.0
