"""
Abstract game interface for Grid Snake.

The game state machine implements GameInterface. It is kept separate from
input handling and rendering so it can run and be tested headless.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any


class GameInterface(ABC):
    """
    Abstract base class for a tick-driven grid game.

    Games handle the core logic, rules, and state management.
    They never touch the window, the clock or the filesystem.
    """

    @abstractmethod
    def reset(self) -> Dict[str, Any]:
        """
        Reset the game to initial state.

        Returns:
            Initial game state dictionary
        """
        pass

    @abstractmethod
    def tick(self) -> Dict[str, Any]:
        """
        Advance the simulation by one step.

        Returns:
            Game state dictionary after the step
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state for rendering.

        Returns:
            Dictionary containing all state needed for rendering
        """
        pass

    @abstractmethod
    def toggle_pause(self) -> bool:
        """
        Pause or resume the game.

        Returns:
            The paused flag after toggling
        """
        pass
