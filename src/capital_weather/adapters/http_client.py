"""httpx client factory.

Every provider adapter shares one `httpx.AsyncClient` built here, so timeout
and headers are uniform and tests can pass a client backed by
`httpx.MockTransport` instead.
"""

from __future__ import annotations

import httpx

from capital_weather.core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the configured identity and timeout.

    `http_timeout_seconds=None` disables timeouts entirely (httpx otherwise
    defaults to 5 seconds).
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def describe_http_error(exc: httpx.HTTPError) -> str:
    """One-line description of a transport failure, including the URL when known."""

    try:
        url = exc.request.url
    except RuntimeError:
        return f"{type(exc).__name__}: {exc}"
    return f"{type(exc).__name__} while requesting {url}: {exc}"
