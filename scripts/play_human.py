#!/usr/bin/env python3
"""
Human Play Mode - Play the Snake game yourself.

Controls:
    Arrow Keys or WASD: Move the snake
    Space or P: Pause / resume
    R: Restart game
    ESC: Quit

Settings are read from config.yaml; the high score is kept in highscore.txt.
"""
import os
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Suppress pygame messages
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'

from gridsnake.game.session import main


if __name__ == "__main__":
    sys.exit(main())
