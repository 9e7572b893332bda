"""Geocoder backed by Nominatim (OpenStreetMap).

Nominatim answers `/search?q=<name>&format=json` with an array of hits whose
`lat`/`lon` are strings. Only the first hit is used.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from capital_weather.adapters.http_client import describe_http_error
from capital_weather.core.config import AppSettings
from capital_weather.core.domain.errors import DecodeError, NotFoundError, RequestError
from capital_weather.core.domain.models import Coordinates

logger = logging.getLogger(__name__)

_HITS_ADAPTER = TypeAdapter(list[Coordinates])


class NominatimGeocoder:
    """Implements `capital_weather.core.interfaces.Geocoder`."""

    def __init__(self, client: httpx.AsyncClient, settings: AppSettings | None = None) -> None:
        self._client = client
        self._settings = settings or AppSettings()

    @property
    def search_url(self) -> str:
        return f"{self._settings.geocoding_base_url.rstrip('/')}/search"

    async def geocode(self, city: str) -> Coordinates:
        logger.debug("Geocoding %r", city)
        try:
            resp = await self._client.get(self.search_url, params={"q": city, "format": "json"})
        except httpx.HTTPError as exc:
            raise RequestError(describe_http_error(exc)) from exc

        if not resp.is_success:
            raise RequestError(
                f"geocoding request for {city} failed with status code: {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            hits = _HITS_ADAPTER.validate_json(resp.content)
        except ValidationError as exc:
            raise DecodeError(f"failed to decode coordinates for {city}: {exc.errors()[0]['msg']}") from exc

        if not hits:
            raise NotFoundError(f"no coordinates found for {city}")

        return hits[0]
