"""Tests for the httpx transport and the default `create_api` wiring.

`httpx.MockTransport` stands in for the network, so the real httpx request
path (method, content, headers, JSON parsing) is exercised offline.
"""

from __future__ import annotations

import asyncio
import json
import logging

import httpx
import pytest

from huebridge import create_api
from huebridge.adapters import http_client
from huebridge.adapters.http_client import HttpxTransport, build_async_client
from huebridge.core.config import AppSettings


def _settings(**overrides) -> AppSettings:
    values = {"portal_url": "https://www.meethue.com/api/nupnp", "http_timeout_seconds": 5.0}
    values.update(overrides)
    return AppSettings(**values)


class Recorder:
    """MockTransport handler that records requests and replies with JSON."""

    def __init__(self, payload=None, status_code: int = 200, text: str | None = None) -> None:
        self.payload = {"ok": True} if payload is None else payload
        self.status_code = status_code
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)


def _run_with_client(recorder: Recorder, coro_factory):
    async def go():
        async with httpx.AsyncClient(transport=httpx.MockTransport(recorder)) as client:
            return await coro_factory(client)

    return asyncio.run(go())


class TestBuildAsyncClient:
    def test_defaults_from_settings(self):
        client = build_async_client(_settings(user_agent="tests/1.0"), extra_headers={"X-Extra": "1"})
        try:
            assert client.headers["User-Agent"] == "tests/1.0"
            assert client.headers["Accept"] == "application/json"
            assert client.headers["X-Extra"] == "1"
            assert client.timeout.read == 5.0
            assert client.follow_redirects is True
        finally:
            asyncio.run(client.aclose())


class TestHttpxTransport:
    def test_put_sends_json_body(self):
        recorder = Recorder(payload=[{"success": {"/lights/1/state/on": True}}])

        async def call(client):
            transport = HttpxTransport(_settings(), client=client)
            response = await transport.fetch("http://10.0.0.5/api/abc/lights/1/state", method="PUT", body='{"on": true}')
            return await response.json()

        result = _run_with_client(recorder, call)

        assert result == [{"success": {"/lights/1/state/on": True}}]
        request = recorder.requests[0]
        assert request.method == "PUT"
        assert str(request.url) == "http://10.0.0.5/api/abc/lights/1/state"
        assert request.content == b'{"on": true}'
        assert request.headers["Content-Type"] == "application/json"

    def test_get_sends_no_body(self):
        recorder = Recorder()

        async def call(client):
            transport = HttpxTransport(_settings(), client=client)
            return await transport.fetch("http://10.0.0.5/api/abc/lights", method="GET", body=None)

        _run_with_client(recorder, call)

        request = recorder.requests[0]
        assert request.method == "GET"
        assert request.content == b""
        assert "Content-Type" not in request.headers

    def test_error_status_with_json_body_is_returned(self, caplog):
        caplog.set_level(logging.DEBUG, logger="huebridge.adapters.http_client")
        recorder = Recorder(payload={"error": "not found"}, status_code=404)

        async def call(client):
            response = await HttpxTransport(_settings(), client=client).fetch("http://h/api", method="GET", body=None)
            assert response.status_code == 404
            return await response.json()

        assert _run_with_client(recorder, call) == {"error": "not found"}
        assert "GET http://h/api -> HTTP 404" in caplog.text

    def test_non_json_body_fails_to_parse(self):
        recorder = Recorder(status_code=500, text="<html>oops</html>")

        async def call(client):
            response = await HttpxTransport(_settings(), client=client).fetch("http://h/api", method="GET", body=None)
            return await response.json()

        with pytest.raises(json.JSONDecodeError):
            _run_with_client(recorder, call)

    def test_network_error_propagates(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        async def go():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                await HttpxTransport(_settings(), client=client).fetch("http://10.0.0.99/api", method="GET", body=None)

        with pytest.raises(httpx.ConnectError):
            asyncio.run(go())

    def test_opens_a_client_per_request_when_none_injected(self, monkeypatch):
        recorder = Recorder()
        built: list[httpx.AsyncClient] = []

        def fake_builder(settings=None, *, extra_headers=None):
            client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
            built.append(client)
            return client

        monkeypatch.setattr(http_client, "build_async_client", fake_builder)
        transport = HttpxTransport(_settings())

        async def go():
            await transport.fetch("http://h/api/u/lights", method="GET", body=None)
            await transport.fetch("http://h/api/u/groups", method="GET", body=None)

        asyncio.run(go())

        assert len(built) == 2
        assert all(client.is_closed for client in built)
        assert [str(r.url) for r in recorder.requests] == ["http://h/api/u/lights", "http://h/api/u/groups"]

    def test_injected_client_is_left_open(self):
        recorder = Recorder()

        async def go():
            client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
            await HttpxTransport(_settings(), client=client).fetch("http://h/api", method="GET", body=None)
            still_open = not client.is_closed
            await client.aclose()
            return still_open

        assert asyncio.run(go()) is True


class TestCreateApi:
    def test_end_to_end_with_mock_client(self):
        recorder = Recorder(payload=[{"success": {"/lights/3/state/on": True}}])

        async def call(client):
            api = create_api(_settings(), client=client)
            return await api.bridge("10.0.0.5").user("abc").set_light_state(3, {"on": True})

        result = _run_with_client(recorder, call)

        assert result == [{"success": {"/lights/3/state/on": True}}]
        request = recorder.requests[0]
        assert request.method == "PUT"
        assert str(request.url) == "http://10.0.0.5/api/abc/lights/3/state"
        assert json.loads(request.content) == {"on": True}

    def test_discover_uses_configured_portal(self):
        recorder = Recorder(payload=[])

        async def call(client):
            api = create_api(_settings(portal_url="https://portal.example/api/nupnp"), client=client)
            return await api.discover()

        assert _run_with_client(recorder, call) == []
        assert str(recorder.requests[0].url) == "https://portal.example/api/nupnp"
        assert recorder.requests[0].method == "GET"
