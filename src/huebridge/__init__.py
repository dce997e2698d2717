"""Asyncio client for the Philips Hue bridge REST API.

Typical use:

    api = create_api()
    bridges = await api.discover()
    user = api.bridge("192.168.1.2").user("username")
    await user.set_light_state(1, {"on": True})
"""

from __future__ import annotations

import logging

from huebridge.adapters.http_client import HttpxTransport
from huebridge.client import create_api
from huebridge.core.api import HueAPI, HueBridge, HueUser
from huebridge.core.config import AppSettings
from huebridge.core.errors import BridgeError, HueBridgeError, extract_bridge_errors, raise_for_bridge_errors
from huebridge.core.logging_config import setup_logging
from huebridge.core.request_builder import JsonRequester, object_url, parametrize

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AppSettings",
    "BridgeError",
    "HttpxTransport",
    "HueAPI",
    "HueBridge",
    "HueBridgeError",
    "HueUser",
    "JsonRequester",
    "create_api",
    "extract_bridge_errors",
    "object_url",
    "parametrize",
    "raise_for_bridge_errors",
    "setup_logging",
]
