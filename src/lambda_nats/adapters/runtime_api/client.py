"""HTTP client for the Lambda Extensions API.

Wraps ``httpx.AsyncClient`` around the two calls an external extension
makes: ``POST /register`` once, then ``GET /event/next`` in a loop.

Contents:
    * :class:`ExtensionsApiClient` - register and poll for lifecycle events.
    * :func:`open_runtime_api` - factory satisfying the ``OpenRuntimeApi`` port.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import TracebackType

import httpx
import orjson

from lambda_nats.domain.enums import ExtensionEventType
from lambda_nats.domain.errors import ExtensionRegistrationError, RuntimeApiError
from lambda_nats.domain.events import ExtensionEvent

logger = logging.getLogger(__name__)

EXTENSION_API_VERSION = "2020-01-01"
NAME_HEADER = "Lambda-Extension-Name"
IDENTIFIER_HEADER = "Lambda-Extension-Identifier"


class ExtensionsApiClient:
    """Async client bound to one ``AWS_LAMBDA_RUNTIME_API`` address.

    ``event/next`` blocks until Lambda has something to deliver, so reads have
    no timeout; connect and write keep ``timeout``.

    Example:
        >>> client = ExtensionsApiClient("127.0.0.1:9001")
        >>> str(client.base_url)
        'http://127.0.0.1:9001/2020-01-01/extension/'
    """

    def __init__(
        self,
        runtime_api: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=f"http://{runtime_api}/{EXTENSION_API_VERSION}/extension",
            timeout=httpx.Timeout(timeout, read=None),
            transport=transport,
        )

    @property
    def base_url(self) -> httpx.URL:
        return self._client.base_url

    async def register(self, name: str, events: Sequence[ExtensionEventType]) -> str:
        """Register the extension and return its identifier.

        Raises:
            ExtensionRegistrationError: Transport failure, non-200 status, or missing identifier header.
        """
        try:
            response = await self._client.post(
                "/register",
                content=orjson.dumps({"events": [event.value for event in events]}),
                headers={"Content-Type": "application/json", NAME_HEADER: name},
            )
        except httpx.HTTPError as exc:
            raise ExtensionRegistrationError(f"Failed to register extension: {exc}") from exc
        if response.status_code != httpx.codes.OK:
            raise ExtensionRegistrationError(
                f"Register failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        extension_id = response.headers.get(IDENTIFIER_HEADER)
        if not extension_id:
            raise ExtensionRegistrationError(f"Missing {IDENTIFIER_HEADER} header", body=response.text)
        logger.info("Registered extension", extra={"extension": name, "extension_id": extension_id})
        return extension_id

    async def next_event(self, extension_id: str) -> ExtensionEvent:
        """Block until the next lifecycle event arrives.

        Raises:
            RuntimeApiError: Transport failure, non-200 status, or a body that is not a JSON object.
        """
        try:
            response = await self._client.get("/event/next", headers={IDENTIFIER_HEADER: extension_id})
        except httpx.HTTPError as exc:
            raise RuntimeApiError(f"Failed to get next event: {exc}") from exc
        if response.status_code != httpx.codes.OK:
            raise RuntimeApiError(f"Next event failed with status {response.status_code}: {response.text}")
        try:
            payload = orjson.loads(response.content)
        except orjson.JSONDecodeError as exc:
            raise RuntimeApiError(f"Failed to unmarshal event: {exc}") from exc
        if not isinstance(payload, dict):
            raise RuntimeApiError(f"Failed to unmarshal event: expected object, got {type(payload).__name__}")
        return ExtensionEvent.from_payload(payload)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> ExtensionsApiClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


def open_runtime_api(runtime_api: str, *, timeout: float) -> ExtensionsApiClient:
    """Return a client for ``runtime_api``; the caller owns closing it."""
    return ExtensionsApiClient(runtime_api, timeout=timeout)


__all__ = [
    "EXTENSION_API_VERSION",
    "IDENTIFIER_HEADER",
    "NAME_HEADER",
    "ExtensionsApiClient",
    "open_runtime_api",
]
