"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Application
    app_name: str = "Welcome Service"
    app_version: str = "0.1.0"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Server binding (PORT is the conventional variable set by hosting platforms)
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)

    # Root route
    welcome_message: str = "Welcome to Node.js ESM Best Practices!"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    # JSON body parsing
    json_body_limit: int = Field(default=100 * 1024, gt=0)
    json_strict: bool = True

    @property
    def effective_log_level(self) -> str:
        """Return DEBUG if debug mode, otherwise configured log_level."""
        return "DEBUG" if self.debug else self.log_level

    @property
    def effective_log_format(self) -> str:
        """Return json for production, otherwise configured log_format."""
        if self.environment == "production":
            return "json"
        return self.log_format

    @property
    def base_url(self) -> str:
        return f"http://localhost:{self.port}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    return Settings()
