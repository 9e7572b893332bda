"""Application settings.

Lives in the core so adapters and the CLI read endpoints and HTTP identity
from one contract:
- values come from `CAPITAL_WEATHER_*` environment variables or `.env` files
- the project `.env` is read first, then the per-user config `.env`
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "capital-weather"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "capital-weather"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "capital-weather"
    return Path.home() / ".config" / "capital-weather"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    The polling interval and the weather query options are fixed constants
    and are intentionally absent here.
    """

    model_config = SettingsConfigDict(
        env_prefix="CAPITAL_WEATHER_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    countries_base_url: str = Field(
        default="https://restcountries.com",
        min_length=8,
        description="Base URL of the REST Countries API.",
    )
    geocoding_base_url: str = Field(
        default="https://nominatim.openstreetmap.org",
        min_length=8,
        description="Base URL of the Nominatim geocoding API.",
    )
    weather_base_url: str = Field(
        default="https://api.open-meteo.com",
        min_length=8,
        description="Base URL of the Open-Meteo forecast API.",
    )
    user_agent: str = Field(
        default="capital-weather/0.1 (+https://local)",
        min_length=1,
        description="User-Agent sent to every provider (Nominatim rejects anonymous clients).",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds. Unset means requests are not bounded.",
    )
