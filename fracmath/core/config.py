"""
Application configuration.

Settings are read from ``FRACMATH_``-prefixed environment variables and an
optional ``.env`` file.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="FRACMATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: Literal["text", "json"] = "text"
    LOG_FILE: Optional[str] = None

    # Expression evaluated when the CLI gets no arguments
    DEFAULT_EXPRESSION: str = "? 2_3/8 + 9/8"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
