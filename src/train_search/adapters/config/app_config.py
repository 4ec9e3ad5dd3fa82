"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=3001, description="Port to bind the server to")
    log_level: str = Field(default="info", description="Log level for the application and uvicorn")

    # Schedule store
    trains_file: str | None = Field(
        default=None,
        description="Path to a TOML catalog of [[trains]] used to seed the schedule store",
    )

    # Request handling
    rate_limit_per_minute: int = Field(
        default=100,
        description="Maximum number of requests allowed per IP address per minute (0 disables)",
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        description="Upper bound in seconds for fetching trains and searching them",
    )
    log_requests: bool = Field(
        default=False,
        description="Log one line per HTTP request with method, path, query and status",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one uvicorn understands."""
        if v.lower() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return v.lower()

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_request_timeout(cls, v: float) -> float:
        """Validate request timeout is positive."""
        if v <= 0:
            raise ValueError("request_timeout_seconds must be positive")
        return v

    def load_trains_data(self) -> list[dict[str, Any]]:
        """Parse and return the [[trains]] tables of the TOML catalog.

        Returns an empty list when no catalog is configured.
        """
        if not self.trains_file:
            return []

        catalog_path = Path(self.trains_file)
        if not catalog_path.exists():
            raise FileNotFoundError(f"Train catalog not found: {catalog_path}")

        with open(catalog_path, "rb") as f:
            toml_data = tomllib.load(f)

        trains = toml_data.get("trains", [])
        if not isinstance(trains, list):
            raise ValueError("TOML catalog 'trains' must be a list")
        return trains
