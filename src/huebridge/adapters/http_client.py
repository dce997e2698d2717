"""httpx transport for the request core.

Why a wrapper:
- Standardizes timeouts and headers for every bridge/portal request.
- Eases testing: the core only sees the `Transport` protocol, so an
  `httpx.MockTransport`-backed client or a plain fake can be swapped in.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from huebridge.core.config import AppSettings

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the library defaults.

    Why a builder:
    - Centralizes timeouts/headers so portal and bridge calls behave the same.
    - Bridges serve plain HTTP on the LAN; redirects are followed for the portal.
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
    )


class HttpxResponse:
    """Adapts `httpx.Response` to `TransportResponse`."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    async def json(self) -> Any:
        # Status codes are not interpreted; an error page that is not JSON
        # raises json.JSONDecodeError here.
        return self._response.json()


class HttpxTransport:
    """`Transport` implementation backed by httpx.

    With no `client`, every request opens and closes its own
    `httpx.AsyncClient`. An injected client is reused and left open: its
    owner closes it.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._client = client

    async def fetch(self, url: str, *, method: str, body: str | None) -> HttpxResponse:
        headers = {"Content-Type": "application/json"} if body is not None else None

        if self._client is not None:
            response = await self._client.request(method, url, content=body, headers=headers)
        else:
            async with build_async_client(self._settings) as client:
                response = await client.request(method, url, content=body, headers=headers)

        wrapped = HttpxResponse(response)
        logger.debug("%s %s -> HTTP %s", method, url, wrapped.status_code)
        return wrapped
