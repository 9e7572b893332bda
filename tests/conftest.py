"""Shared fixtures: settings pointing at fake hosts and httpx mock clients."""

from __future__ import annotations

import random
from typing import Callable

import httpx
import pytest

from capital_weather.core.config import AppSettings
from capital_weather.core.domain.models import Country

Handler = Callable[[httpx.Request], httpx.Response]

TESTLAND_JSON = b'[{"name":{"common":"Testland"},"capital":["Testville"]}]'


class FixedRandom(random.Random):
    """Random source whose `randrange` always returns the same index."""

    def __init__(self, index: int = 0) -> None:
        super().__init__(0)
        self.index = index

    def randrange(self, *args, **kwargs) -> int:
        return self.index


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        countries_base_url="https://countries.test",
        geocoding_base_url="https://geo.test",
        weather_base_url="https://weather.test",
        user_agent="capital-weather-tests/1.0",
    )


@pytest.fixture
def make_client() -> Callable[[Handler], httpx.AsyncClient]:
    """Factory for an `httpx.AsyncClient` answering through `handler`."""

    def _make(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def testland() -> tuple[Country, ...]:
    return (Country.model_validate({"name": {"common": "Testland"}, "capital": ["Testville"]}),)
