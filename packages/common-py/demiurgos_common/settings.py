"""
demiurgos Settings

Process-wide configuration read from ``DEMIURGOS_*`` environment variables.

Library code never reads these globals directly: the CLI builds a
``DemiurgosSettings`` once and passes the directories it needs into the
installed store and the source locator, so tests can inject a temporary root.
"""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    APP_NAME,
    DEFAULT_GIT_EXECUTABLE,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_LOG_LEVEL,
    GENERATORS_DIR,
    LOG_LEVELS,
)


def default_data_dir() -> Path:
    """Local data directory: $XDG_DATA_HOME/demiurgos or ~/.local/share/demiurgos."""
    xdg_data_home = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg_data_home) if xdg_data_home else Path.home() / ".local" / "share"
    return base / APP_NAME


class DemiurgosSettings(BaseSettings):
    data_dir: Path = Field(default_factory=default_data_dir)
    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = False
    http_timeout: int = Field(default=DEFAULT_HTTP_TIMEOUT, ge=1)
    git_executable: str = DEFAULT_GIT_EXECUTABLE

    model_config = SettingsConfigDict(env_prefix="DEMIURGOS_", env_file=None, extra="ignore")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.lower() not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: '{v}'. Valid levels: {', '.join(LOG_LEVELS)}")
        return v.lower()

    @property
    def generators_dir(self) -> Path:
        """Root of the installed store."""
        return self.data_dir / GENERATORS_DIR


@lru_cache(maxsize=1)
def get_settings() -> DemiurgosSettings:
    """Load and cache settings from the environment."""
    return DemiurgosSettings()


__all__ = ["DemiurgosSettings", "default_data_dir", "get_settings"]
