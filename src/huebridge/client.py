"""Default wiring: httpx transport + stdlib json encoder."""

from __future__ import annotations

import json

import httpx

from huebridge.adapters.http_client import HttpxTransport
from huebridge.core.api import HueAPI
from huebridge.core.config import AppSettings
from huebridge.core.request_builder import JsonRequester


def create_api(
    settings: AppSettings | None = None,
    *,
    client: httpx.AsyncClient | None = None,
) -> HueAPI:
    """Build a portal-level `HueAPI` ready to use.

    `client` is optional; when given, all requests go through it and the
    caller remains responsible for closing it.
    """

    settings = settings or AppSettings()
    transport = HttpxTransport(settings, client=client)
    requester = JsonRequester(transport, json)
    return HueAPI(
        requester,
        portal_url=settings.portal_url,
        bridge_scheme=settings.bridge_scheme,
    )
