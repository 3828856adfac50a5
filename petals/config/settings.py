"""
Petals Around the Rose - Application Settings

Loads configuration from environment variables (prefixed ``PETALS_``)
or a local ``.env`` file using Pydantic Settings.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from petals.engine.base import (
    DEFAULT_DICE_COUNT,
    DEFAULT_DICE_PER_ROW,
    MAX_DICE,
    RollStrategy,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Game
    dice_count: int = Field(default=DEFAULT_DICE_COUNT, ge=1, le=MAX_DICE)
    dice_per_row: int = Field(default=DEFAULT_DICE_PER_ROW, ge=1)

    # Randomness
    rng_seed: int | None = None
    roll_strategy: RollStrategy = RollStrategy.INDEPENDENT

    # Application
    log_level: str = "WARNING"

    model_config = {
        "env_prefix": "PETALS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
