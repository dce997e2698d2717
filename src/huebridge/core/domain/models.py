"""Domain models (Pydantic v2).

Bridge resources (lights, groups, scenes...) stay opaque JSON: the library
does not validate what the bridge returns. The models here only describe
the library's own values: the request being sent and, for callers that
opt in, the shape of a bridge error object.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class HttpMethod(str, Enum):
    """HTTP verbs used by the bridge API."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


class RequestDescriptor(BaseModel):
    """One outgoing request, built per call and discarded afterwards.

    `body` is the already-serialized JSON text, or `None` when the request
    carries no body.
    """

    model_config = ConfigDict(frozen=True)

    method: HttpMethod = Field(
        ...,
        description="HTTP verb.",
    )
    url: str = Field(
        ...,
        description="Fully built target URL (not validated).",
    )
    body: str | None = Field(
        default=None,
        description="Serialized JSON body (None means no body).",
    )


class BridgeErrorDetail(BaseModel):
    """Error object embedded by the bridge in an otherwise valid response.

    The bridge answers `[{"error": {"type": 1, "address": "/", "description": "unauthorized user"}}]`.
    """

    model_config = ConfigDict(extra="ignore")

    type: int = Field(
        ...,
        description="Numeric bridge error code.",
    )
    address: str = Field(
        default="",
        description="Resource path the error refers to.",
    )
    description: str = Field(
        default="",
        description="Human readable message from the bridge.",
    )
