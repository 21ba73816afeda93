"""Environment configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

import structlog
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Document store (MongoDB)
    mongodb_uri: str = ""
    db_name: str = "pathpilot"
    mongodb_connect_timeout_seconds: float = 15.0

    # Gemini configuration
    gemini_key: str = ""
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1"
    gemini_model: str = "gemini-1.5-flash"  # lighter model, avoids free-tier quota
    gemini_timeout_seconds: float = 60.0

    # Server configuration
    port: int = 3000
    host: str = "0.0.0.0"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    environment: Literal["development", "production"] = "development"
    cors_origins: list[str] = ["*"]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def has_gemini_key(self) -> bool:
        """Check if the Gemini API key is configured."""
        return bool(self.gemini_key.strip())

    @property
    def has_mongodb_uri(self) -> bool:
        """Check if the MongoDB connection string is configured."""
        return bool(self.mongodb_uri.strip())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
