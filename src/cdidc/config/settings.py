"""Pydantic settings for cdidc configuration."""

import sys
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def default_browser_command() -> str:
    """Return the platform helper that opens a URL in the user's browser."""
    if sys.platform == "darwin":
        return "open"
    return "xdg-open"


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="CDIDC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Device settings
    device: str | None = Field(
        default=None,
        description="Optical drive to read (default: chosen by libdiscid)",
    )

    # Submission
    browser: str = Field(
        default_factory=default_browser_command,
        description="Command used to open the MusicBrainz submission URL",
    )

    # Localization
    locale_dir: Path = Field(
        default=Path("/usr/share/locale"),
        description="Directory holding compiled message catalogs",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format",
    )

    @field_validator("locale_dir", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Expand user home directory in paths."""
        return Path(v).expanduser()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
