"""NATS publisher stories with a stand-in client."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest
from nats.errors import NoServersError

from lambda_nats.adapters.messaging import publisher as publisher_mod
from lambda_nats.adapters.messaging.publisher import NatsPublisher, connect_publisher
from lambda_nats.domain.errors import PublisherError


class StubClient:
    """Records what a nats-py client would have been asked to do."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []
        self.is_closed = False

    async def publish(self, subject: str, payload: bytes) -> None:
        self.calls.append(("publish", (subject, payload)))

    async def flush(self) -> None:
        self.calls.append(("flush", None))

    async def close(self) -> None:
        self.calls.append(("close", None))
        self.is_closed = True


@pytest.mark.os_agnostic
def test_connect_retries_until_the_server_answers(monkeypatch: pytest.MonkeyPatch) -> None:
    """Failed attempts are retried up to the configured budget."""
    client = StubClient()
    attempts: list[dict[str, Any]] = []

    async def flaky_connect(**kwargs: Any) -> StubClient:
        attempts.append(kwargs)
        if len(attempts) < 3:
            raise NoServersError()
        return client

    monkeypatch.setattr(publisher_mod.nats, "connect", flaky_connect)

    publisher = asyncio.run(connect_publisher("nats://127.0.0.1:4222", attempts=5, interval=0, timeout=1.0))

    assert isinstance(publisher, NatsPublisher)
    assert len(attempts) == 3
    assert attempts[0]["servers"] == ["nats://127.0.0.1:4222"]
    assert attempts[0]["connect_timeout"] == 1.0


@pytest.mark.os_agnostic
def test_connect_gives_up_after_the_last_attempt(monkeypatch: pytest.MonkeyPatch) -> None:
    """Exhausting every attempt raises PublisherError naming the URL."""
    attempts: list[int] = []

    async def refused(**_kwargs: Any) -> StubClient:
        attempts.append(1)
        raise ConnectionRefusedError("refused")

    monkeypatch.setattr(publisher_mod.nats, "connect", refused)

    with pytest.raises(PublisherError, match="nats://127.0.0.1:4222"):
        asyncio.run(connect_publisher("nats://127.0.0.1:4222", attempts=4, interval=0, timeout=1.0))

    assert len(attempts) == 4


@pytest.mark.os_agnostic
def test_publish_flushes_after_each_notice() -> None:
    """Each notice is flushed so it leaves before the sandbox freezes."""
    client = StubClient()

    asyncio.run(NatsPublisher(client).publish("lambda", b"Function invoked"))  # type: ignore[arg-type]

    assert client.calls == [("publish", ("lambda", b"Function invoked")), ("flush", None)]


@pytest.mark.os_agnostic
def test_close_is_idempotent() -> None:
    """A closed connection is not closed twice."""
    client = StubClient()
    publisher = NatsPublisher(client)  # type: ignore[arg-type]

    asyncio.run(publisher.close())
    asyncio.run(publisher.close())

    assert client.calls == [("close", None)]
