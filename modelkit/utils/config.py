"""
Configuration management using pydantic-settings.
Loads configuration from environment variables and .env file.
"""

from functools import lru_cache
from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from MODELKIT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MODELKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging Configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FILE: Optional[str] = None  # Also log to this file when set
    DEBUG: bool = False

    # Message Catalog Configuration
    LOCALE: str = "en"
    MESSAGES_PATH: Optional[str] = None  # Directory of <locale>.yaml catalogs

    @property
    def log_to_file(self) -> bool:
        """Whether a file handler should be attached to loggers."""
        return bool(self.LOG_FILE)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure settings are loaded only once.
    """
    return Settings()


# Global settings instance
settings = get_settings()
