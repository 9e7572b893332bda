"""CLI entry point (Typer).

Running the bare command starts the poller; `doctor` runs diagnostics.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import random
import signal
from typing import Awaitable, Callable, Iterator

import httpx
import typer
from rich.console import Console

from capital_weather.adapters.countries import load_countries
from capital_weather.adapters.geocoding import NominatimGeocoder
from capital_weather.adapters.http_client import build_async_client
from capital_weather.adapters.weather import OpenMeteoProvider
from capital_weather.cli.doctor import doctor
from capital_weather.cli.logging_setup import setup_logging
from capital_weather.cli.ui_components import build_console, format_temperature_line
from capital_weather.core.config import AppSettings
from capital_weather.core.domain.errors import CapitalWeatherError, LoadError
from capital_weather.core.domain.models import WeatherReading
from capital_weather.core.services.poller import Poller, PollerHooks

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Print the current temperature of a random world capital every 5 seconds.",
)
app.command(name="doctor")(doctor)


@contextlib.contextmanager
def _stop_on_sigint(stop: asyncio.Event) -> Iterator[None]:
    """Route SIGINT to `stop` while the block runs.

    Where the loop cannot install signal handlers (Windows), Ctrl+C surfaces
    as `KeyboardInterrupt` instead and is handled by the command.
    """

    loop = asyncio.get_running_loop()
    try:
        loop.add_signal_handler(signal.SIGINT, stop.set)
    except (NotImplementedError, RuntimeError):
        yield
        return
    try:
        yield
    finally:
        loop.remove_signal_handler(signal.SIGINT)


def build_hooks(console: Console) -> PollerHooks:
    def on_reading(city: str, reading: WeatherReading) -> None:
        console.print(format_temperature_line(city, reading))

    def on_geocode_failed(city: str, exc: CapitalWeatherError) -> None:
        console.print(str(exc))

    def on_weather_failed(city: str, exc: CapitalWeatherError) -> None:
        # Not printed: a failed weather lookup leaves no console line.
        logger.debug("Weather lookup for %s failed: %s", city, exc)

    return PollerHooks(
        reading=on_reading,
        geocode_failed=on_geocode_failed,
        weather_failed=on_weather_failed,
    )


async def watch(
    *,
    console: Console,
    settings: AppSettings | None = None,
    stop: asyncio.Event | None = None,
    rng: random.Random | None = None,
    ticker: Callable[[], Awaitable[None]] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """Load the countries, then poll until stopped. Returns the exit code."""

    settings = settings or AppSettings()
    stop = stop or asyncio.Event()

    console.print("Loading random capitals...")
    async with build_async_client(settings, transport=transport) as client:
        try:
            countries = await load_countries(client, settings)
        except LoadError as exc:
            console.print(f"Error loading cities: {exc}")
            return 1

        poller = Poller(
            countries,
            NominatimGeocoder(client, settings),
            OpenMeteoProvider(client, settings),
            rng=rng,
            ticker=ticker,
            hooks=build_hooks(console),
        )
        with _stop_on_sigint(stop):
            await poller.run(stop)
    return 0


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs on stderr."),
) -> None:
    """Poll a random capital's weather until interrupted (Ctrl+C)."""

    setup_logging(verbose=verbose)
    if ctx.invoked_subcommand is not None:
        return

    try:
        exit_code = asyncio.run(watch(console=build_console()))
    except KeyboardInterrupt:
        exit_code = 0
    raise typer.Exit(code=exit_code)


def run() -> None:
    app()
