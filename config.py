"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class GameConfig:
    """Default game configuration."""

    starting_balance: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_STARTING_BALANCE", "1000"))
    )
    reshuffle_threshold: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_RESHUFFLE_THRESHOLD", "20"))
    )
    min_bet: int = 1


@dataclass(frozen=True)
class PersistenceConfig:
    """High score storage configuration."""

    high_score_file: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_HIGH_SCORE_FILE", "high_score.txt")
    )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    persistence: PersistenceConfig = field(default_factory=PersistenceConfig)


# Global configuration instance
config = AppConfig()
