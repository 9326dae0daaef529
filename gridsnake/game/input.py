"""
Input translation - turn pygame events into abstract game actions.
"""
from enum import Enum, auto
from typing import Dict, Optional

import pygame

from .point import Direction


class InputAction(Enum):
    """Discrete signals the game session understands."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    PAUSE = auto()
    RESTART = auto()
    QUIT = auto()


ACTION_DIRECTIONS: Dict[InputAction, Direction] = {
    InputAction.UP: Direction.UP,
    InputAction.DOWN: Direction.DOWN,
    InputAction.LEFT: Direction.LEFT,
    InputAction.RIGHT: Direction.RIGHT,
}


def default_key_bindings() -> Dict[int, InputAction]:
    """Arrow keys / WASD to move, Space or P to pause, R to restart, ESC to quit."""
    return {
        pygame.K_UP: InputAction.UP,
        pygame.K_w: InputAction.UP,
        pygame.K_DOWN: InputAction.DOWN,
        pygame.K_s: InputAction.DOWN,
        pygame.K_LEFT: InputAction.LEFT,
        pygame.K_a: InputAction.LEFT,
        pygame.K_RIGHT: InputAction.RIGHT,
        pygame.K_d: InputAction.RIGHT,
        pygame.K_SPACE: InputAction.PAUSE,
        pygame.K_p: InputAction.PAUSE,
        pygame.K_r: InputAction.RESTART,
        pygame.K_ESCAPE: InputAction.QUIT,
    }


def translate_event(
    event: "pygame.event.Event",
    bindings: Optional[Dict[int, InputAction]] = None,
) -> Optional[InputAction]:
    """
    Map a pygame event to an action.

    Args:
        event: Event from pygame.event.get()
        bindings: Key code to action table (defaults to default_key_bindings())

    Returns:
        The action, or None for events the game ignores
    """
    if event.type == pygame.QUIT:
        return InputAction.QUIT

    if event.type == pygame.KEYDOWN:
        if bindings is None:
            bindings = default_key_bindings()
        return bindings.get(event.key)

    return None
