"""Application configuration."""

import logging
import os
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

LogLevel = Literal["fatal", "error", "warn", "info", "debug", "trace"]

_LOG_LEVELS: dict[str, int] = {
    "fatal": logging.CRITICAL,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: Literal["development", "test", "production"] = "development"
    host: str = "0.0.0.0"  # noqa: S104
    port: int = Field(default=3000, gt=0, le=65535)
    log_level: LogLevel = "info"
    cors_origins: str = "*"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return ["*"]
    origins = [chunk.strip() for chunk in raw.split(",") if chunk.strip()]
    return origins or ["*"]


def resolve_log_level(name: str) -> int:
    """Map a configured level name to a stdlib logging level."""
    return _LOG_LEVELS.get(name.lower(), logging.INFO)
