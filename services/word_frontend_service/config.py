"""Configuration for Word Frontend Service.

Uses Pydantic settings for environment-based configuration. Settings are
constructed once at startup and passed explicitly into the application factory;
missing or malformed backend/frontend URLs fail construction.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Literal
from urllib.parse import urlsplit

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SERVICE_DIR = Path(__file__).resolve().parent

# Fixed listening port, not read from the environment.
HTTP_PORT = 8000


class Environment(str, Enum):
    """Defines application environments."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class WordFrontendSettings(BaseSettings):
    """Configuration settings for Word Frontend Service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="WORD_FRONTEND_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    # Service identity
    SERVICE_NAME: str = "word-frontend-service"

    # Environment
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        validation_alias="ENVIRONMENT",
        description="Runtime environment for the service",
    )

    # HTTP server configuration
    HOST: str = Field(default="0.0.0.0", description="HTTP server host")

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )

    # Backend definitions API and this server's public address
    BACKEND_URL: str = Field(
        description="Base URL of the backend definitions API",
        validation_alias=AliasChoices("VITE_BACKEND", "WORD_FRONTEND_BACKEND_URL"),
    )
    FRONTEND_URL: str = Field(
        description="Public base URL of this server, used in log messages",
        validation_alias=AliasChoices("VITE_FRONTEND", "WORD_FRONTEND_FRONTEND_URL"),
    )

    # Static file serving
    STATIC_DIR: Path = Field(
        default=SERVICE_DIR / "public",
        description="Directory containing the HTML/JS/CSS assets",
    )

    # HTTP client configuration
    HTTP_CLIENT_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        description="HTTP client request timeout in seconds",
    )
    HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="HTTP client connection timeout in seconds",
    )

    @field_validator("BACKEND_URL", "FRONTEND_URL")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        """Require an absolute http(s) URL and drop any trailing slash."""
        value = value.strip()
        parts = urlsplit(value)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"must be an absolute http(s) URL, got {value!r}")
        return value.rstrip("/")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value
