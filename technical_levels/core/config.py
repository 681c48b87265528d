"""Configuration management using Pydantic v2 settings.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")

    # Level detection defaults (applied when a caller leaves a setting unset)
    default_swing_lookback: int = Field(
        default=3, ge=1, description="Window radius (in candles) for swing pivot detection"
    )
    default_proximity_percent: float = Field(
        default=0.006,
        gt=0,
        description="Fractional price distance treated as the same level (0.006 = 0.6%)",
    )
    default_max_levels_per_side: int = Field(
        default=4, ge=1, description="Maximum number of support/resistance levels returned per side"
    )
    default_use_volume_confirmation: bool = Field(
        default=True, description="Weight pivot significance by relative volume"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Engine settings
    """
    return Settings()
