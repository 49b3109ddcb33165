"""Settings for calendar-jp.

Configuration is read from ``CALENDAR_JP_``-prefixed environment variables
and an optional ``.env`` file through pydantic-settings.

Fields
──────
rules_path     : JSON rule document to load instead of the packaged table
log_level      : Structlog log level
json_logs      : Force JSON (True) / console (False) logs; None auto-detects
cache_enabled  : Memoize per-year holiday maps

Examples:
    >>> import os
    >>> os.environ["CALENDAR_JP_LOG_LEVEL"] = "DEBUG"
    >>> CalendarSettings().log_level
    'DEBUG'
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CalendarSettings(BaseSettings):
    """Runtime configuration for :class:`calendar_jp.CalendarJp` and the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="CALENDAR_JP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Rule table ───────────────────────────────────────────────
    rules_path: Path | None = Field(
        default=None,
        description="JSON rule document; the packaged table is used when unset",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    json_logs: bool | None = None

    # ── Engine ───────────────────────────────────────────────────
    cache_enabled: bool = True

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level
