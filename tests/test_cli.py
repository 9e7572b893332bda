"""Tests for the CLI layer."""

import asyncio
import io
import logging
import os
import signal
import sys

import httpx
import pytest
from rich.console import Console
from typer.testing import CliRunner

from capital_weather.cli import doctor as doctor_module
from capital_weather.cli import main as cli_main
from capital_weather.cli.ui_components import format_temperature_line
from capital_weather.core.domain.models import WeatherReading

from conftest import TESTLAND_JSON, FixedRandom

FORECAST = {"current_weather": {"temperature": 21.34, "windspeed": 3.0, "time": "2024-05-01T15:00"}}


def _recording_console():
    buffer = io.StringIO()
    return Console(file=buffer, markup=False, highlight=False, width=200), buffer


def _providers(geocode_response=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "countries.test":
            return httpx.Response(200, content=TESTLAND_JSON)
        if request.url.host == "geo.test":
            return geocode_response or httpx.Response(200, json=[{"lat": "52.52", "lon": "13.405"}])
        if request.url.host == "weather.test":
            return httpx.Response(200, json=FORECAST)
        return httpx.Response(404)

    return httpx.MockTransport(handler)


def _ticks_then_stop(stop, count):
    fired = 0

    async def ticker():
        nonlocal fired
        if fired == count:
            stop.set()
        fired += 1
        await asyncio.sleep(0)

    return ticker


class TestFormatting:
    def test_temperature_line(self):
        line = format_temperature_line("Testville", WeatherReading(temperature=-3.25))
        assert line == "the Temperature in Testville is: -3.2°C"

    def test_rounds_to_one_decimal(self):
        assert format_temperature_line("Oslo", WeatherReading(temperature=7)).endswith(": 7.0°C")


class TestWatch:
    @pytest.mark.asyncio
    async def test_prints_one_line_per_tick(self, settings):
        console, buffer = _recording_console()
        stop = asyncio.Event()

        code = await cli_main.watch(
            console=console,
            settings=settings,
            stop=stop,
            rng=FixedRandom(0),
            ticker=_ticks_then_stop(stop, 1),
            transport=_providers(),
        )

        assert code == 0
        assert buffer.getvalue().splitlines() == [
            "Loading random capitals...",
            "the Temperature in Testville is: 21.3°C",
        ]

    @pytest.mark.asyncio
    async def test_geocode_error_text_is_printed(self, settings):
        console, buffer = _recording_console()
        stop = asyncio.Event()

        await cli_main.watch(
            console=console,
            settings=settings,
            stop=stop,
            rng=FixedRandom(0),
            ticker=_ticks_then_stop(stop, 2),
            transport=_providers(geocode_response=httpx.Response(200, json=[])),
        )

        assert buffer.getvalue().splitlines() == [
            "Loading random capitals...",
            "no coordinates found for Testville",
            "no coordinates found for Testville",
        ]

    @pytest.mark.asyncio
    async def test_weather_error_prints_nothing(self, settings, caplog):
        console, buffer = _recording_console()
        stop = asyncio.Event()

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "countries.test":
                return httpx.Response(200, content=TESTLAND_JSON)
            if request.url.host == "geo.test":
                return httpx.Response(200, json=[{"lat": "52.52", "lon": "13.405"}])
            return httpx.Response(500, json={"error": True, "reason": "boom"})

        with caplog.at_level(logging.DEBUG, logger="capital_weather.cli.main"):
            code = await cli_main.watch(
                console=console,
                settings=settings,
                stop=stop,
                rng=FixedRandom(0),
                ticker=_ticks_then_stop(stop, 1),
                transport=httpx.MockTransport(handler),
            )

        assert code == 0
        assert buffer.getvalue().splitlines() == ["Loading random capitals..."]
        messages = [r.getMessage() for r in caplog.records if r.name == "capital_weather.cli.main"]
        assert any(m.startswith("Weather lookup for Testville failed") and "boom" in m for m in messages)

    @pytest.mark.asyncio
    async def test_out_of_range_hit_reaches_weather_step(self, settings):
        console, buffer = _recording_console()
        stop = asyncio.Event()
        weather_requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "countries.test":
                return httpx.Response(200, content=TESTLAND_JSON)
            if request.url.host == "geo.test":
                return httpx.Response(200, json=[{"lat": "91", "lon": "13.405"}])
            weather_requests.append(request)
            return httpx.Response(400, json={"error": True, "reason": "Latitude must be in range of -90 to 90"})

        await cli_main.watch(
            console=console,
            settings=settings,
            stop=stop,
            rng=FixedRandom(0),
            ticker=_ticks_then_stop(stop, 1),
            transport=httpx.MockTransport(handler),
        )

        assert weather_requests[0].url.params["latitude"] == "91.0"
        assert buffer.getvalue().splitlines() == ["Loading random capitals..."]

    @pytest.mark.asyncio
    @pytest.mark.skipif(sys.platform == "win32", reason="loop signal handlers are POSIX only")
    async def test_sigint_sets_stop(self):
        stop = asyncio.Event()

        with cli_main._stop_on_sigint(stop):
            os.kill(os.getpid(), signal.SIGINT)
            await asyncio.wait_for(stop.wait(), timeout=2)

        assert stop.is_set()

    @pytest.mark.asyncio
    async def test_load_failure_returns_exit_code_1(self, settings):
        console, buffer = _recording_console()

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, content=b"down")

        code = await cli_main.watch(
            console=console,
            settings=settings,
            transport=httpx.MockTransport(handler),
        )

        assert code == 1
        output = buffer.getvalue()
        assert "Error loading cities: API request failed with status code: 500" in output


class TestCommands:
    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_help(self, runner):
        result = runner.invoke(cli_main.app, ["--help"])
        assert result.exit_code == 0
        assert "doctor" in result.output

    def test_bare_command_exits_with_watch_code(self, runner, monkeypatch):
        async def fake_watch(*, console):
            return 1

        monkeypatch.setattr(cli_main, "watch", fake_watch)
        result = runner.invoke(cli_main.app, [])
        assert result.exit_code == 1

    def test_doctor_all_ok(self, runner, monkeypatch):
        async def fake_check_all(settings, transport=None):
            return [("Countries", True, "HTTP 200"), ("Geocoding", True, "HTTP 200"), ("Weather", True, "HTTP 200")]

        monkeypatch.setattr(doctor_module, "_check_all", fake_check_all)
        result = runner.invoke(cli_main.app, ["doctor"])
        assert result.exit_code == 0
        assert "Geocoding" in result.output
        assert "FAIL" not in result.output

    def test_doctor_failure_exits_1(self, runner, monkeypatch):
        async def fake_check_all(settings, transport=None):
            return [("Countries", True, "HTTP 200"), ("Geocoding", False, "HTTP 403"), ("Weather", True, "HTTP 200")]

        monkeypatch.setattr(doctor_module, "_check_all", fake_check_all)
        result = runner.invoke(cli_main.app, ["doctor"])
        assert result.exit_code == 1
        assert "FAIL" in result.output


class TestDoctorProbes:
    @pytest.mark.asyncio
    async def test_probes_every_provider(self, settings):
        hosts = []

        def handler(request: httpx.Request) -> httpx.Response:
            hosts.append(request.url.host)
            if request.url.host == "geo.test":
                return httpx.Response(403)
            return httpx.Response(200, json={})

        results = await doctor_module._check_all(settings, transport=httpx.MockTransport(handler))

        assert hosts == ["countries.test", "geo.test", "weather.test"]
        assert results == [
            ("Countries", True, "HTTP 200"),
            ("Geocoding", False, "HTTP 403"),
            ("Weather", True, "HTTP 200"),
        ]
