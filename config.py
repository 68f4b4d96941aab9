"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse WILDCAT_SEED environment variable."""
    raw = os.getenv("WILDCAT_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


@dataclass(frozen=True)
class GameConfig:
    """Table limits and scoring policy."""

    min_players: int = 1
    max_players: int = 4
    min_rounds: int = 1
    max_rounds: int = 50
    dealer_stands_on: int = 17

    # Round points
    win_points: int = 5
    place_points: tuple[int, ...] = (3, 1)  # Places 2, 3, ... in head-to-head
    twenty_one_bonus: int = 15

    # "Lucky Son of a Gun" is only awarded for games of exactly this length
    lucky_rounds: int = 5


@dataclass(frozen=True)
class StorageConfig:
    """High-score persistence."""

    highscore_path: str = field(
        default_factory=lambda: os.getenv("WILDCAT_HIGHSCORE_FILE", "highscore.txt")
    )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(
        default_factory=lambda: os.getenv("WILDCAT_DEBUG", "false").lower() == "true"
    )
    seed: int | None = field(default_factory=_parse_seed)

    game: GameConfig = field(default_factory=GameConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)


# Global configuration instance
config = AppConfig()
