"""Typed runtime settings with dotenv support and startup validation."""

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the release service runtime.

    Environment variable names map directly to field names in uppercase.
    Example: `port` reads from `PORT`.

    Attributes:
        host: Host interface for web server binding.
        port: Web server port.
        release_name: Release profile served by this process (`v1` or `v2`).
        log_level: Root log level name.
        graceful_shutdown_seconds: Upper bound for draining in-flight requests on termination.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080, ge=1, le=65535)
    release_name: Literal["v1", "v2"] = Field(default="v1")
    log_level: str = Field(default="INFO")
    graceful_shutdown_seconds: float = Field(default=10.0, gt=0)

    @field_validator("release_name", mode="before")
    @classmethod
    def _normalize_release_name(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unsupported log level: {value}")
        return normalized_value


def config_load_settings(**overrides: object) -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Args:
        **overrides: Explicit field values that take precedence over the environment.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are missing or invalid.
    """

    try:
        return AppSettings(**overrides)
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
