"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from capital_weather.adapters.http_client import build_async_client, describe_http_error
from capital_weather.cli.ui_components import build_settings_table
from capital_weather.core.config import AppSettings

_console = Console()


def provider_probes(settings: AppSettings) -> list[tuple[str, str, dict[str, str]]]:
    """(label, url, params) of one cheap request per provider."""

    return [
        (
            "Countries",
            f"{settings.countries_base_url.rstrip('/')}/v3.1/name/france",
            {"fields": "name,capital"},
        ),
        (
            "Geocoding",
            f"{settings.geocoding_base_url.rstrip('/')}/search",
            {"q": "Paris", "format": "json"},
        ),
        (
            "Weather",
            f"{settings.weather_base_url.rstrip('/')}/v1/forecast",
            {"latitude": "48.85", "longitude": "2.35", "current_weather": "true"},
        ),
    ]


async def _check_http(
    settings: AppSettings,
    url: str,
    params: dict[str, str],
    transport: httpx.AsyncBaseTransport | None = None,
) -> tuple[bool, str]:
    try:
        async with build_async_client(settings, transport=transport) as client:
            response = await client.get(url, params=params)
    except httpx.HTTPError as exc:
        return False, describe_http_error(exc)
    return response.is_success, f"HTTP {response.status_code}"


async def _check_all(
    settings: AppSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[tuple[str, bool, str]]:
    results = []
    for label, url, params in provider_probes(settings):
        ok, detail = await _check_http(settings, url, params, transport)
        results.append((label, ok, detail))
    return results


def doctor() -> None:
    """Show the effective settings and probe every provider."""

    settings = AppSettings()
    _console.print(build_settings_table(settings))

    table = Table(title="capital-weather Doctor")
    table.add_column("Provider", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    results = asyncio.run(_check_all(settings))
    for label, ok, detail in results:
        table.add_row(label, "OK" if ok else "FAIL", detail)
    _console.print(table)

    if not all(ok for _, ok, _ in results):
        _console.print(
            "\n[yellow]Note:[/yellow] Nominatim refuses anonymous clients. "
            "Set CAPITAL_WEATHER_USER_AGENT to something that identifies you."
        )
        raise typer.Exit(code=1)
