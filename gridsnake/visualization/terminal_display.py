"""
Terminal Display - Rich-based console output for play sessions.

Prints the controls banner at startup, one line per finished round,
and a summary table when the window is closed.
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table


# Force UTF-8 encoding for Windows compatibility
console = Console(legacy_windows=False, markup=True)


CONTROLS = [
    ("Arrow Keys / WASD", "Move"),
    ("Space / P", "Pause / resume"),
    ("R", "Restart"),
    ("ESC", "Quit"),
]


@dataclass
class SessionStats:
    """Scores collected over one process run."""
    games_played: int = 0
    best_score: int = 0
    total_score: int = 0
    high_score: int = 0
    new_records: int = 0

    def record_game(self, score: int, high_score: int, new_record: bool):
        """Account for a finished round."""
        self.games_played += 1
        self.total_score += score
        self.best_score = max(self.best_score, score)
        self.high_score = high_score
        if new_record:
            self.new_records += 1

    @property
    def average_score(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self.total_score / self.games_played


def print_controls(title: str, boundary: str, high_score: int,
                   out: Optional[Console] = None):
    """Show the controls and starting high score."""
    out = out or console

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Action")
    for key, action in CONTROLS:
        table.add_row(key, action)
    table.add_row("", "")
    table.add_row("Edges", "wrap around" if boundary == "wrap" else "[red]deadly walls[/]")
    table.add_row("High Score", f"[yellow]{high_score}[/]")

    out.print(Panel(table, title=title, border_style="green"))


def print_game_over(score: int, high_score: int, new_record: bool,
                    out: Optional[Console] = None):
    """One line for a finished round."""
    out = out or console
    if new_record:
        out.print(f"[bold green]NEW HIGH SCORE: {score}![/]")
    else:
        out.print(f"Game Over! Score: {score} | High Score: [yellow]{high_score}[/]")


def print_session_summary(stats: SessionStats, out: Optional[Console] = None):
    """Summary table printed when the session ends."""
    out = out or console

    table = Table(title="Session Summary", show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Games played", str(stats.games_played))
    table.add_row("Best score", str(stats.best_score))
    table.add_row("Average score", f"{stats.average_score:.1f}")
    table.add_row("New records", str(stats.new_records))
    table.add_row("High score", f"[yellow]{stats.high_score}[/]")

    out.print(table)
