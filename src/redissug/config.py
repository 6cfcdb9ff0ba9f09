"""
redissug Configuration Management

Centralized configuration using pydantic-settings with environment variable support.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, RedisDsn, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ══════════════════════════════════════════════════════════════
    # Application
    # ══════════════════════════════════════════════════════════════
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # ══════════════════════════════════════════════════════════════
    # Redis
    # ══════════════════════════════════════════════════════════════
    redis_url: RedisDsn = Field(default="redis://localhost:6379/0")
    redis_password: str = ""
    redis_socket_timeout: float | None = 5.0
    redis_command_timeout: float | None = None  # per-call deadline, seconds

    # ══════════════════════════════════════════════════════════════
    # Suggestions
    # ══════════════════════════════════════════════════════════════
    suggest_default_max: int = 10

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("redis_socket_timeout", "redis_command_timeout", mode="before")
    @classmethod
    def parse_optional_timeout(cls, v: str | float | None) -> float | None:
        if isinstance(v, str) and v.strip().lower() in ("", "none", "null"):
            return None
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience export
settings = get_settings()
