"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting
  the CLI.
- Lets adapters (terminal prompts, exporters) read settings consistently.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _platform_config_base() -> Path:
    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA") or Path.home())
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")


def get_user_config_dir() -> Path:
    """Per-user configuration directory.

    `SPLIT_IT_CONFIG_DIR` wins when set; otherwise the platform's usual
    location is used (APPDATA, Application Support or XDG_CONFIG_HOME).
    """

    override = (os.environ.get("SPLIT_IT_CONFIG_DIR") or "").strip()
    if override:
        return Path(override)
    return _platform_config_base() / "split-it"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Every field can be set through a `SPLIT_IT_*` environment variable or a
    `.env` file (project first, then the per-user one).
    """

    model_config = SettingsConfigDict(
        env_prefix="SPLIT_IT_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    minor_unit_scale: int = Field(
        default=100,
        ge=1,
        description="Minor units per major unit (100 cents per unit).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level for the CLI.",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the welcome banner in interactive runs.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)
