"""Application configuration.

Centralizes environment variables (pydantic-settings). Only the command layer
reads settings; the core receives plain values through constructors.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "gh-user-status"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central settings, overridable with `GH_USER_STATUS_*` variables."""

    model_config = SettingsConfigDict(
        env_prefix="GH_USER_STATUS_",
        extra="ignore",
        case_sensitive=False,
        # Later files win: a project .env overrides the user's global one.
        env_file=(str(get_user_env_file()), ".env"),
        env_file_encoding="utf-8",
    )

    gh_binary: str = Field(
        default="gh",
        min_length=1,
        description="Name or path of the GitHub CLI executable.",
    )
    required_scope: str = Field(
        default="user",
        min_length=1,
        description="OAuth scope needed to change a status.",
    )
    default_emoji: str = Field(
        default="thought_balloon",
        description="Emoji alias used by `set` when --emoji is not given.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level when --verbose is not given.",
    )
