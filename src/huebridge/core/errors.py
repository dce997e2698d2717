"""Bridge error objects.

The request path never raises these: a bridge answering 200 with an error
list is a successful call as far as transport and parsing go. Callers that
want structured failures pass the parsed payload through
`raise_for_bridge_errors`.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from huebridge.core.domain.models import BridgeErrorDetail


class HueBridgeError(Exception):
    """Base class for exceptions raised by this package."""


class BridgeError(HueBridgeError):
    """The bridge reported one or more errors in its JSON response."""

    def __init__(self, errors: list[BridgeErrorDetail]) -> None:
        self.errors = errors
        message = "; ".join(f"{e.type} {e.address}: {e.description}" for e in errors)
        super().__init__(message or "bridge reported an error")


def extract_bridge_errors(payload: Any) -> list[BridgeErrorDetail]:
    """Collect `{"error": {...}}` entries from a parsed bridge response.

    The bridge wraps results in a list; a bare object is also accepted.
    Entries that do not look like error objects are ignored.
    """

    items = payload if isinstance(payload, list) else [payload]
    out: list[BridgeErrorDetail] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        error = item.get("error")
        if not isinstance(error, dict):
            continue
        try:
            out.append(BridgeErrorDetail.model_validate(error))
        except ValidationError:
            continue
    return out


def raise_for_bridge_errors(payload: Any) -> Any:
    """Return `payload` unchanged, or raise `BridgeError` if it holds error objects."""

    errors = extract_bridge_errors(payload)
    if errors:
        raise BridgeError(errors)
    return payload
