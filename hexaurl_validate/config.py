"""Configuration management using Pydantic Settings.

Environment variables are prefixed with ``HEXAURL_`` and may also be loaded
from a .env file. Settings only control logging; validation rules are
always passed explicitly as a ``Config``.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HEXAURL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = Field(
        default="development",
        description="Environment name (development, staging, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    # Logging
    log_json: bool | None = Field(
        default=None,
        description="Force JSON log output. If not set, JSON is used in production",
    )
    log_truncate_length: int = Field(
        default=100,
        description="Maximum length of string values in log records",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        """Lowercase and strip the environment name."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_truncate_length", mode="after")
    @classmethod
    def validate_truncate_length(cls, v: int) -> int:
        """Truncation needs room for the ellipsis."""
        if v < 4:
            raise ValueError("log_truncate_length must be at least 4")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
