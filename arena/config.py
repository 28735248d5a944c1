"""Configuration management for Arena Duel.

This module provides typed configuration loading from environment variables
using pydantic-settings. Every setting can be given as ARENA_<NAME> in the
environment or in a .env file, and command line flags override them.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The .env file should be in the directory the duel is run from.
    """

    model_config = SettingsConfigDict(
        env_prefix="ARENA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    rng_seed: Optional[int] = Field(
        default=None,
        description="Seed for the random source (None seeds from the clock)",
    )
    experience_award: int = Field(
        default=50,
        ge=0,
        description="Experience given to the survivor of a duel",
    )
    max_rounds: Optional[int] = Field(
        default=None,
        ge=1,
        description="Optional round limit; a duel reaching it has no winner",
    )
    item_count: int = Field(
        default=5,
        ge=0,
        description="Number of items generated for the sorting demo",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level name (DEBUG, INFO, WARNING, ...)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise to upper case and reject unknown level names."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    def is_seeded(self) -> bool:
        """Check if duels will be reproducible."""
        return self.rng_seed is not None


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
