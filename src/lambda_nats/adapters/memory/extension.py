"""In-memory NATS and Extensions API doubles for testing.

Contents:
    * :class:`PublisherSpy` - captures published notices and connection attempts.
    * :class:`ScriptedRuntimeApi` - replays a fixed list of lifecycle events.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ...domain.enums import ExtensionEventType
from ...domain.errors import PublisherError, RuntimeApiError
from ...domain.events import ExtensionEvent


def _empty_records() -> list[Any]:
    return []


@dataclass
class PublisherSpy:
    """Captures publish calls; doubles as its own connection factory.

    Attributes:
        published: ``(subject, payload)`` tuples in publish order.
        connections: Keyword arguments of each ``connect`` call.
        refuse_connect: When True, ``connect`` raises :class:`PublisherError`.
        fail_payloads: Payloads whose publish raises ``ConnectionError``.
        closed: Set once ``close`` ran.

    Example:
        >>> import asyncio
        >>> spy = PublisherSpy()
        >>> publisher = asyncio.run(spy.connect("nats://x:4222", attempts=1, interval=0, timeout=1))
        >>> asyncio.run(publisher.publish("lambda", b"hi"))
        >>> spy.published
        [('lambda', b'hi')]
    """

    published: list[tuple[str, bytes]] = field(default_factory=_empty_records)
    connections: list[dict[str, Any]] = field(default_factory=_empty_records)
    refuse_connect: bool = False
    fail_payloads: set[bytes] = field(default_factory=set)
    closed: bool = False

    async def connect(self, url: str, *, attempts: int, interval: float, timeout: float) -> PublisherSpy:
        self.connections.append({"url": url, "attempts": attempts, "interval": interval, "timeout": timeout})
        if self.refuse_connect:
            raise PublisherError(f"Failed to connect to NATS at {url}: refused")
        return self

    async def publish(self, subject: str, payload: bytes) -> None:
        if payload in self.fail_payloads:
            raise ConnectionError(f"publish of {payload!r} dropped")
        self.published.append((subject, payload))

    async def close(self) -> None:
        self.closed = True

    @property
    def notices(self) -> list[str]:
        return [payload.decode("utf-8") for _, payload in self.published]


@dataclass
class ScriptedRuntimeApi:
    """Extensions API double that hands out ``events`` in order.

    Running past the end of the script raises :class:`RuntimeApiError`, the
    same way a broken ``event/next`` would.
    """

    events: list[ExtensionEvent] = field(default_factory=_empty_records)
    extension_id: str = "ext-0001"
    registrations: list[dict[str, Any]] = field(default_factory=_empty_records)
    opened: list[dict[str, Any]] = field(default_factory=_empty_records)
    polled_with: list[str] = field(default_factory=_empty_records)
    register_error: Exception | None = None
    closed: bool = False

    @classmethod
    def from_types(cls, *event_types: str, **kwargs: Any) -> ScriptedRuntimeApi:
        return cls(events=[ExtensionEvent(event_type=t) for t in event_types], **kwargs)

    def open(self, runtime_api: str, *, timeout: float) -> ScriptedRuntimeApi:
        self.opened.append({"runtime_api": runtime_api, "timeout": timeout})
        return self

    async def register(self, name: str, events: Sequence[ExtensionEventType]) -> str:
        self.registrations.append({"name": name, "events": [e.value for e in events]})
        if self.register_error is not None:
            raise self.register_error
        return self.extension_id

    async def next_event(self, extension_id: str) -> ExtensionEvent:
        self.polled_with.append(extension_id)
        if not self.events:
            raise RuntimeApiError("Next event failed: script exhausted")
        return self.events.pop(0)

    async def aclose(self) -> None:
        self.closed = True


__all__ = ["PublisherSpy", "ScriptedRuntimeApi"]
