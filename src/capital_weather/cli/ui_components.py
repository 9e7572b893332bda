"""Rich UI components for the CLI.

Keeps the output format out of the command code so the poller command and
`doctor` share one console setup.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from capital_weather.core.config import AppSettings
from capital_weather.core.domain.models import WeatherReading


def build_console() -> Console:
    """Console for result lines.

    Markup and highlighting are off so city names and provider error texts
    print byte for byte.
    """

    return Console(markup=False, highlight=False, emoji=False, soft_wrap=True)


def format_temperature_line(city: str, reading: WeatherReading) -> str:
    return f"the Temperature in {city} is: {reading.temperature:.1f}°C"


def build_settings_table(settings: AppSettings) -> Table:
    """Table with the effective settings (for `doctor`)."""

    table = Table(title="Settings")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("countries_base_url", settings.countries_base_url)
    table.add_row("geocoding_base_url", settings.geocoding_base_url)
    table.add_row("weather_base_url", settings.weather_base_url)
    table.add_row("user_agent", settings.user_agent)
    timeout = settings.http_timeout_seconds
    table.add_row("http_timeout_seconds", "unbounded" if timeout is None else f"{timeout:g}")
    return table
