"""Country loader (REST Countries).

Runs once at startup. Any failure here is fatal for the process, so every
error is surfaced as `LoadError` with the precise cause chained.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from capital_weather.adapters.http_client import describe_http_error
from capital_weather.core.config import AppSettings
from capital_weather.core.domain.errors import DecodeError, LoadError, RequestError
from capital_weather.core.domain.models import Country

logger = logging.getLogger(__name__)

_COUNTRIES_ADAPTER = TypeAdapter(list[Country])

# The public API rejects `/all` without a field filter.
_FIELDS = "name,capital"


async def load_countries(
    client: httpx.AsyncClient,
    settings: AppSettings | None = None,
) -> tuple[Country, ...]:
    """Fetch every country with its capitals.

    Raises `LoadError` when the request fails, the status is not 200, the body
    is not a JSON array of country records, or the array is empty. A non-200
    body is never decoded.
    """

    settings = settings or AppSettings()
    url = f"{settings.countries_base_url.rstrip('/')}/v3.1/all"

    logger.debug("Loading countries from %s", url)
    try:
        resp = await client.get(url, params={"fields": _FIELDS})
    except httpx.HTTPError as exc:
        cause = RequestError(f"failed to fetch data: {describe_http_error(exc)}")
        raise LoadError(str(cause)) from cause

    if resp.status_code != httpx.codes.OK:
        cause = RequestError(
            f"API request failed with status code: {resp.status_code}",
            status_code=resp.status_code,
        )
        raise LoadError(str(cause)) from cause

    try:
        countries = _COUNTRIES_ADAPTER.validate_json(resp.content)
    except ValidationError as exc:
        cause = DecodeError(f"failed to decode JSON: {exc.error_count()} error(s), first: {exc.errors()[0]['msg']}")
        raise LoadError(str(cause)) from cause

    if not countries:
        raise LoadError("countries provider returned an empty list")

    logger.debug("Loaded %d countries", len(countries))
    return tuple(countries)
