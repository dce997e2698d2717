"""Shared test doubles.

The request core only talks to a `Transport` and a `JsonEncoder`, so the
tests replace both with in-memory fakes: no network, and every outgoing
request is recorded for inspection.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import pytest

from huebridge.core.api import HueAPI
from huebridge.core.request_builder import JsonRequester


@dataclass
class RecordedRequest:
    url: str
    method: str
    body: str | None


class FakeResponse:
    def __init__(self, payload: Any = None, error: Exception | None = None) -> None:
        self._payload = payload
        self._error = error

    async def json(self) -> Any:
        if self._error is not None:
            raise self._error
        return self._payload


@dataclass
class FakeTransport:
    """Records requests and answers with `payload` (or raises `error`)."""

    payload: Any = field(default_factory=lambda: {"ok": True})
    error: Exception | None = None
    parse_error: Exception | None = None
    requests: list[RecordedRequest] = field(default_factory=list)

    async def fetch(self, url: str, *, method: str, body: str | None) -> FakeResponse:
        self.requests.append(RecordedRequest(url=url, method=method, body=body))
        if self.error is not None:
            raise self.error
        return FakeResponse(self.payload, self.parse_error)

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]


class SpyEncoder:
    """stdlib json encoder that counts calls."""

    def __init__(self) -> None:
        self.calls: list[Any] = []

    def dumps(self, obj: Any) -> str:
        self.calls.append(obj)
        return json.dumps(obj)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def encoder() -> SpyEncoder:
    return SpyEncoder()


@pytest.fixture
def requester(transport: FakeTransport, encoder: SpyEncoder) -> JsonRequester:
    return JsonRequester(transport, encoder)


@pytest.fixture
def api(requester: JsonRequester) -> HueAPI:
    return HueAPI(requester)
