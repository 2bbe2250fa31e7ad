"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without polluting the
  CLI.
- Lets the HTTP adapter and the commands read the same, validated settings.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "tailor"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "tailor"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "tailor"
    return Path.home() / ".config" / "tailor"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Variable names follow the TYPO3 tooling conventions (`TYPO3_API_TOKEN`,
    `TYPO3_EXTENSION_KEY`, ...) so existing CI setups keep working.
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPO3_",
        extra="ignore",
        case_sensitive=False,
        # Project first, then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    remote_base_uri: str = Field(
        default="https://extensions.typo3.org/",
        min_length=8,
        description="Base URI of the TER instance.",
    )
    api_version: str = Field(
        default="v1",
        min_length=1,
        description="TER REST API version segment.",
    )
    api_token: str | None = Field(
        default=None,
        description="Bearer token created with `tailor ter token create`.",
    )
    api_username: str | None = Field(
        default=None,
        description="typo3.org username for basic authentication.",
    )
    api_password: str | None = Field(
        default=None,
        description="typo3.org password for basic authentication.",
    )
    extension_key: str | None = Field(
        default=None,
        description="Fallback extension key for commands that take one.",
    )
    disable_docs_version_update: bool = Field(
        default=False,
        description="Skip rewriting Documentation/ files in `set-version`.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="tailor-python/0.1",
        min_length=1,
        description="User-Agent sent to the TER API.",
    )

    @property
    def api_base_url(self) -> str:
        return f"{self.remote_base_uri.rstrip('/')}/api/{self.api_version.strip('/')}/"
