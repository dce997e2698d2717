"""Contracts for the collaborators of the request core.

Why Protocol:
- Defines a structural contract (duck typing) without rigid inheritance.
- Lets the httpx adapter and test fakes be swapped freely without coupling
  the core to a concrete HTTP library.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TransportResponse(Protocol):
    """Response returned by a transport; only JSON parsing is needed."""

    async def json(self) -> Any:
        """Parse the response body as JSON."""

        ...


@runtime_checkable
class Transport(Protocol):
    """Minimal HTTP fetch capability.

    Design rules:
    - `fetch` is asynchronous because it performs network I/O.
    - TLS, headers and timeouts are the transport's business, not the core's.
    """

    async def fetch(self, url: str, *, method: str, body: str | None) -> TransportResponse:
        ...


@runtime_checkable
class JsonEncoder(Protocol):
    """JSON serialization capability (the stdlib `json` module satisfies it)."""

    def dumps(self, obj: Any) -> str:
        ...
