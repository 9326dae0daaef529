"""
Visualization module for Grid Snake.

Contains the rich-based terminal output used by the play session.
"""

from .terminal_display import (
    SessionStats,
    console,
    print_controls,
    print_game_over,
    print_session_summary,
)

__all__ = [
    'SessionStats',
    'console',
    'print_controls',
    'print_game_over',
    'print_session_summary',
]
