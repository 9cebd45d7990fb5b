"""NATS publisher for extension lifecycle notices.

Contents:
    * :class:`NatsPublisher` - publish-and-flush wrapper around a nats-py client.
    * :func:`connect_publisher` - connect with a fixed number of attempts.
"""

from __future__ import annotations

import asyncio
import logging

import nats
from nats.aio.client import Client
from nats.errors import Error as NatsError

from lambda_nats.domain.errors import PublisherError

logger = logging.getLogger(__name__)


class NatsPublisher:
    """Publishes UTF-8 notices on an established connection."""

    def __init__(self, client: Client) -> None:
        self._client = client

    async def publish(self, subject: str, payload: bytes) -> None:
        """Publish ``payload`` and flush so it leaves before Lambda freezes the sandbox."""
        await self._client.publish(subject, payload)
        await self._client.flush()

    async def close(self) -> None:
        if not self._client.is_closed:
            await self._client.close()


async def connect_publisher(url: str, *, attempts: int, interval: float, timeout: float) -> NatsPublisher:
    """Connect to ``url``, retrying ``attempts`` times ``interval`` seconds apart.

    Raises:
        PublisherError: When every attempt failed.
    """
    last_error: Exception | None = None
    for attempt in range(1, attempts + 1):
        try:
            client = await nats.connect(servers=[url], connect_timeout=timeout, allow_reconnect=False)
        except (NatsError, OSError, asyncio.TimeoutError) as exc:
            last_error = exc
            logger.debug("NATS connect attempt failed", extra={"url": url, "attempt": attempt, "error": str(exc)})
            if attempt < attempts:
                await asyncio.sleep(interval)
            continue
        logger.info("Connected to NATS", extra={"url": url, "attempt": attempt})
        return NatsPublisher(client)
    raise PublisherError(f"Failed to connect to NATS at {url}: {last_error}") from last_error


__all__ = ["NatsPublisher", "connect_publisher"]
