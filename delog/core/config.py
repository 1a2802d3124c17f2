# delog/core/config.py
"""
Environment-driven configuration for delog.

Defines `LoggerSettings` (Pydantic BaseSettings), read from `DELOG_*`
environment variables and an optional local `.env` file.

Nothing here touches the filesystem on import. Settings only take effect
when passed to `Logger.configure()` (or `delog.configure()` for the
process-wide logger).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from delog.core.levels import LEVEL_NAMES


DEFAULT_LOG_FILE = "log.log"


class LoggerSettings(BaseSettings):
    """
    Logger settings loaded from environment variables and optional `.env`.

    Example:
        DELOG_LOG_FILE=/var/log/myapp.log
        DELOG_LOG_LEVEL=info
        DELOG_STDOUT=true
    """

    model_config = SettingsConfigDict(
        env_prefix="DELOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    LOG_FILE: str = Field(
        default=DEFAULT_LOG_FILE,
        description="Path of the log file (opened in append mode)",
    )
    LOG_LEVEL: str = Field(
        default="none",
        description="One of none|error|warning|info|debug",
    )
    STDOUT: bool = Field(
        default=False,
        description="Mirror records of every level to standard output",
    )
    INTERNAL_LOG_LEVEL: Optional[str] = Field(
        default=None,
        description="Level for delog's own operational logging (unset leaves it silent)",
    )

    @field_validator("LOG_FILE")
    @classmethod
    def _strip_log_file(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("LOG_FILE must not be empty")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        v = (v or "none").strip().lower()
        if v not in LEVEL_NAMES:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LEVEL_NAMES)}")
        return v

    @field_validator("INTERNAL_LOG_LEVEL")
    @classmethod
    def _normalize_internal_level(cls, v: Optional[str]) -> Optional[str]:
        v = (v or "").strip().upper()
        return v or None


@lru_cache(maxsize=1)
def get_settings() -> LoggerSettings:
    """Settings read once from the environment and reused afterwards."""
    return LoggerSettings()
