"""Concrete adapters (HTTP).

Why a package:
- Keeps httpx out of the core; the core depends on the `Transport` protocol.
"""

from huebridge.adapters.http_client import HttpxResponse, HttpxTransport, build_async_client

__all__ = [
    "HttpxResponse",
    "HttpxTransport",
    "build_async_client",
]
