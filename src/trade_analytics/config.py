"""
Configuration module using pydantic-settings.

Loads settings from environment variables with sensible defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TRADE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Configuration
    api_title: str = "Fantasy Trade Analytics API"
    api_version: str = "0.1.0"
    api_description: str = "Trade fairness, impact and risk scoring for fantasy football"
    debug: bool = False
    log_level: str = "INFO"

    # Scoring engine
    season_weeks: int = 17
    default_player_age: int = 25
    strength_of_schedule: float = 0.52  # Not modelled per player yet
    performance_volatility: float = 25.0
    situational_risk: float = 20.0

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
