"""
High score persistence - a single plain-text integer on disk.
"""
from pathlib import Path
from typing import Union

from ..visualization.terminal_display import console


DEFAULT_HIGH_SCORE_FILE = "highscore.txt"


class HighScoreStore:
    """
    Reads and writes the high score file.

    A missing, unreadable or garbled file counts as a high score of 0.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_HIGH_SCORE_FILE):
        self.path = Path(path)

    def load(self) -> int:
        """
        Read the stored high score.

        Returns:
            Stored value, or 0 if there is nothing usable on disk
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return 0

        try:
            value = int(text.strip())
        except ValueError:
            console.print(f"[yellow][HighScore][/] Ignoring unparsable {self.path}")
            return 0

        return max(value, 0)

    def save(self, score: int) -> bool:
        """
        Overwrite the file with the given score.

        Returns:
            True if the file was written
        """
        try:
            self.path.write_text(str(score), encoding="utf-8")
        except OSError as e:
            console.print(f"[red][HighScore][/] Could not save to {self.path}: {e}")
            return False
        return True
