"""
Configuration Loader - Load and validate configuration from YAML.

Looks for config.yaml in the working directory, then in the project root.
Missing sections and keys fall back to the dataclass defaults; unknown
keys are ignored.
"""
import yaml
from pathlib import Path
from typing import Optional, Any, List
from dataclasses import dataclass, field, asdict


BOUNDARY_NAMES = ("wrap", "wall")

DEFAULT_FONT_PATHS = [
    "arial.ttf",
    "C:/Windows/Fonts/arial.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/System/Library/Fonts/Helvetica.ttc",
]


@dataclass
class GameConfig:
    """Game rules configuration."""
    grid_width: int = 30
    grid_height: int = 20
    boundary: str = "wrap"
    initial_length: int = 3
    move_delay_ms: int = 100


@dataclass
class DisplayConfig:
    """Window and text settings."""
    cell_size: int = 20
    fps: int = 60
    title: str = "Snake Game - Wrap-around & High Score"
    font_size: int = 20
    font_paths: List[str] = field(default_factory=lambda: list(DEFAULT_FONT_PATHS))
    use_default_font: bool = True


@dataclass
class HighScoreConfig:
    """High score persistence settings."""
    file: str = "highscore.txt"


@dataclass
class Config:
    """Complete application configuration."""
    game: GameConfig = field(default_factory=GameConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    high_score: HighScoreConfig = field(default_factory=HighScoreConfig)


def _dict_to_dataclass(data: Any, cls: type, section: str) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if data is None:
        return cls()

    if not isinstance(data, dict):
        raise ValueError(f"{section} must be a mapping, got {type(data).__name__}")

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def validate_config(config: Config) -> Config:
    """
    Check values that would otherwise fail deep inside the game.

    Raises:
        ValueError: Naming the offending key
    """
    game = config.game
    if game.boundary not in BOUNDARY_NAMES:
        raise ValueError(
            f"game.boundary must be one of {BOUNDARY_NAMES}, got {game.boundary!r}"
        )

    positive = {
        "game.grid_width": game.grid_width,
        "game.grid_height": game.grid_height,
        "game.initial_length": game.initial_length,
        "game.move_delay_ms": game.move_delay_ms,
        "display.cell_size": config.display.cell_size,
        "display.fps": config.display.fps,
        "display.font_size": config.display.font_size,
    }
    for key, value in positive.items():
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"{key} must be a positive integer, got {value!r}")

    return config


def _find_config_file() -> Optional[Path]:
    possible_paths = [
        Path.cwd() / "config.yaml",
        Path(__file__).parent.parent.parent / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path

    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to config.yaml lookup)

    Returns:
        Config object with all settings
    """
    path = Path(config_path) if config_path is not None else _find_config_file()

    if path is None or not path.exists():
        print("[Config] No config file found, using defaults")
        return Config()

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return Config()

    if not isinstance(data, dict):
        raise ValueError(f"{path} must hold a mapping of sections, got {type(data).__name__}")

    config = Config()

    if 'game' in data:
        config.game = _dict_to_dataclass(data['game'], GameConfig, 'game')

    if 'display' in data:
        config.display = _dict_to_dataclass(data['display'], DisplayConfig, 'display')

    if 'high_score' in data:
        config.high_score = _dict_to_dataclass(data['high_score'], HighScoreConfig, 'high_score')

    print(f"[Config] Loaded {path}")
    return validate_config(config)


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
