"""JSON request primitives and the parametrization combinator.

Every API method ends up here: a verb coroutine receives a fully built URL
(and an optional body), serializes the body, hands it to the transport and
parses the JSON answer. Errors are never caught: a failed encode, a failed
network call or an unparsable body surfaces from the awaited call as-is.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Concatenate, ParamSpec, TypeVar

from huebridge.core.domain.models import HttpMethod, RequestDescriptor
from huebridge.core.interfaces.transport import JsonEncoder, Transport

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

ResourceId = str | int


class JsonRequester:
    """Generic JSON request function plus its four verb specializations.

    The transport and the encoder are injected so tests can substitute fakes.
    """

    def __init__(self, transport: Transport, encoder: JsonEncoder) -> None:
        self._transport = transport
        self._encoder = encoder

    async def request_json(self, method: HttpMethod | str, url: str, data: Any) -> Any:
        """Perform a request and return the parsed JSON response.

        `data` is serialized only when it is not None. The HTTP status is not
        inspected; any JSON body is returned.
        """

        body = None
        if data is not None:
            body = self._encoder.dumps(data)

        request = RequestDescriptor(method=HttpMethod(method), url=url, body=body)
        logger.debug("%s %s", request.method.value, request.url)

        try:
            response = await self._transport.fetch(request.url, method=request.method.value, body=request.body)
            return await response.json()
        except Exception as exc:
            logger.debug("%s %s failed: %r", request.method.value, request.url, exc)
            raise

    async def request_json_url(self, method: HttpMethod | str, url: str) -> Any:
        return await self.request_json(method, url, None)

    # GET and DELETE never carry a body; trailing arguments are dropped.
    async def get(self, url: str, *_ignored: Any) -> Any:
        return await self.request_json_url(HttpMethod.GET, url)

    async def put(self, url: str, data: Any = None) -> Any:
        return await self.request_json(HttpMethod.PUT, url, data)

    async def post(self, url: str, data: Any = None) -> Any:
        return await self.request_json(HttpMethod.POST, url, data)

    async def delete(self, url: str, *_ignored: Any) -> Any:
        return await self.request_json_url(HttpMethod.DELETE, url)


def object_url(base_url: str) -> Callable[[ResourceId], str]:
    """Return a builder mapping an identifier to `<base_url>/<identifier>`.

    No encoding or validation of the identifier.
    """

    def build(resource_id: ResourceId) -> str:
        return f"{base_url}/{resource_id}"

    return build


def parametrize(
    method: Callable[Concatenate[str, P], Awaitable[T]],
    url: Callable[[Any], str],
) -> Callable[Concatenate[Any, P], Awaitable[T]]:
    """Create a parametrized request function.

    `url` turns a single parameter into a request URL, e.g.
    `lambda light_id: f"{lights_url}/{light_id}"`. The returned function takes
    that parameter followed by the remaining arguments of `method`:

    - a parametrized `get` or `delete` is called as `(id)`
    - a parametrized `put` or `post` is called as `(id, data)`

    Trailing arguments are forwarded unchanged.
    """

    def parametrized(param: Any, /, *args: P.args, **kwargs: P.kwargs) -> Awaitable[T]:
        return method(url(param), *args, **kwargs)

    return parametrized
