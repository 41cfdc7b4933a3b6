"""Application configuration using Pydantic Settings.

This module centralizes runtime configuration for the demo API. Values can
be provided via environment variables (preferred) or fall back to the defaults
below. A ``Settings`` instance is intended to be retrieved via ``get_settings``
which caches the object for reuse across the process.

Environment variable prefix: ``DEMO_API_`` (e.g. ``DEMO_API_HOST``).
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from demo_api.constants import ServiceScope


class Settings(BaseSettings):
    """Runtime application settings.

    Attributes map directly to environment variables using the ``DEMO_API_``
    prefix (case-insensitive). For example, ``host`` <- ``DEMO_API_HOST``.
    """

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host interface to bind the server",
    )  # fmt: skip
    port: int = Field(
        default=8080,
        description="Server port",
    )  # fmt: skip
    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Application log level",
    )
    reload: bool = Field(
        default=False,
        description="Enable auto-reload in development",
    )  # fmt: skip

    # Service settings
    ping_service_scope: ServiceScope = Field(
        default=ServiceScope.SINGLETON,
        description="Ping service lifetime: 'singleton' shares one instance, 'request' builds one per request",
    )  # fmt: skip

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str:
        """Normalize and validate log level."""
        if v is None:
            return "INFO"

        v_upper = str(v).upper()

        allowed = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR"}
        if v_upper not in allowed:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {', '.join(sorted(allowed))}")

        return v_upper

    @field_validator("ping_service_scope", mode="before")
    @classmethod
    def normalize_scope(cls, v: str | ServiceScope | None) -> str | ServiceScope:
        """Accept scope names in any case."""
        if v is None:
            return ServiceScope.SINGLETON
        if isinstance(v, str) and not isinstance(v, ServiceScope):
            return v.strip().lower()
        return v

    model_config = SettingsConfigDict(
        env_prefix="DEMO_API_",  # Prefix for env vars
        case_sensitive=False,
        validate_assignment=True,  # CLI overrides go through the same validators
        extra="ignore",  # Ignore unexpected env vars
        env_file=".env",  # Optional .env loading (if present)
        env_file_encoding="utf-8",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached ``Settings`` instance.

    The first invocation reads environment variables / .env file; subsequent
    calls reuse the same object to ensure consistent config.
    """

    return Settings()


__all__ = ["Settings", "get_settings"]
