"""
Application configuration via Pydantic Settings.

All values are sourced from environment variables (prefixed ``DIFFER_``)
or an .env file.
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import BeforeValidator, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    """Deployment environment identifiers."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class LogLevel(StrEnum):
    """Structured log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def _parse_cors_origins(value: str | list[str]) -> list[str]:
    """Accept comma-separated string or list for CORS origins."""
    if isinstance(value, list):
        return value
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Settings(BaseSettings):
    """Centralised, type-validated application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DIFFER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="forbid",
    )

    # ── Application ────────────────────────────────────────────────────── #
    app_name: str = Field(default="json-differ", description="Human-readable application name")
    app_version: str = Field(default="1.0.0", description="Semantic version string")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Deployment environment (development|testing|production)",
    )
    debug: bool = Field(default=False, description="Enable debug mode. Must be False in production.")

    # ── Server ─────────────────────────────────────────────────────────── #
    host: str = Field(default="127.0.0.1", description="Bind host. Default local-only.")
    port: int = Field(default=8000, ge=1024, le=65535, description="Bind port")

    # ── CORS ───────────────────────────────────────────────────────────── #
    cors_origins: Annotated[list[str], BeforeValidator(_parse_cors_origins)] = Field(
        default=["http://localhost:5173", "http://localhost:3000"],
        description="Comma-separated list of allowed CORS origins",
    )

    # ── Payloads ───────────────────────────────────────────────────────── #
    payload_ttl_seconds: int = Field(
        default=3600,
        ge=1,
        le=86400,
        description="How long a stored payload stays available for /compare",
    )
    fixtures_dir: Path = Field(
        default=Path("./storage"),
        description="Directory holding payload1.json and payload2.json examples",
    )

    # ── Serialization ──────────────────────────────────────────────────── #
    json_indent: int = Field(default=4, ge=0, le=8, description="Pretty-print indent width")
    sort_keys: bool = Field(
        default=True,
        description="Sort object keys so key order never shows up as a change",
    )

    # ── Diff limits ────────────────────────────────────────────────────── #
    max_lines: int = Field(
        default=2000,
        ge=1,
        description="Maximum serialized lines per side",
    )
    max_cells: int = Field(
        default=1_000_000,
        ge=1,
        description=(
            "Maximum left lines x right lines per comparison. The alignment table "
            "holds one cell per pair, so this bounds memory and CPU per request"
        ),
    )
    max_line_tokens: int = Field(
        default=500,
        ge=1,
        description="Modified lines with more tokens than this are not word-highlighted",
    )

    # ── Rate Limiting ──────────────────────────────────────────────────── #
    rate_limit_default: str = Field(
        default="100/minute",
        description="Default rate limit string (slowapi format)",
    )

    # ── Logging ────────────────────────────────────────────────────────── #
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Minimum log level")
    log_json: bool = Field(default=True, description="Emit logs as JSON (False for dev console)")
    log_file: Path | None = Field(default=None, description="Optional log file path")

    # ── Validators ─────────────────────────────────────────────────────── #

    @model_validator(mode="after")
    def production_safety_checks(self) -> Settings:
        if self.environment == Environment.PRODUCTION and self.debug:
            raise ValueError("debug must be False in production")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached Settings singleton."""
    return Settings()
