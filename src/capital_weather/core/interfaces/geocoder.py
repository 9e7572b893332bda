"""Geocoding contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from capital_weather.core.domain.models import Coordinates


@runtime_checkable
class Geocoder(Protocol):
    """Resolves a place name to coordinates."""

    async def geocode(self, city: str) -> Coordinates:
        """Return the best match for `city`.

        Raises `NotFoundError` when the provider knows no such place.
        """

        ...
