"""External Lambda extension use case: lock file, registration, lifecycle notices."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..domain.enums import ExtensionEventType
from ..domain.events import NOTICE_STARTED, notice_for
from .ports import ConnectPublisher, OpenRuntimeApi, Publisher, RuntimeApi, TouchSentinel

if TYPE_CHECKING:
    from ..adapters.config.settings import ExtensionSettings

logger = logging.getLogger(__name__)


class NatsExtension:
    """Announce the extension lifecycle on a NATS subject.

    Sequence: touch the lock file, connect to NATS, register with the
    Extensions API, publish "Extension started", then relay every ``INVOKE``
    as "Function invoked" until ``SHUTDOWN`` ("Extension shutting down")
    ends the loop. Publish failures are logged and skipped; setup and
    polling failures propagate.
    """

    def __init__(
        self,
        *,
        settings: ExtensionSettings,
        touch_sentinel: TouchSentinel,
        connect_publisher: ConnectPublisher,
        open_runtime_api: OpenRuntimeApi,
    ) -> None:
        self._settings = settings
        self._touch_sentinel = touch_sentinel
        self._connect_publisher = connect_publisher
        self._open_runtime_api = open_runtime_api

    async def run(self) -> int:
        """Run until ``SHUTDOWN`` and return the number of ``INVOKE`` events relayed.

        Raises:
            OSError: The lock file could not be created.
            PublisherError: NATS was unreachable for every attempt.
            ExtensionRegistrationError: ``/register`` was refused.
            RuntimeApiError: ``/event/next`` failed.
        """
        settings = self._settings
        self._touch_sentinel(settings.lock_path)
        publisher = await self._connect_publisher(
            settings.peer_nats_url,
            attempts=settings.connect_attempts,
            interval=settings.connect_interval_seconds,
            timeout=settings.request_timeout,
        )
        try:
            api = self._open_runtime_api(settings.runtime_api, timeout=settings.request_timeout)
            try:
                return await self._relay(api, publisher)
            finally:
                await api.aclose()
        finally:
            await publisher.close()

    async def _relay(self, api: RuntimeApi, publisher: Publisher) -> int:
        settings = self._settings
        extension_id = await api.register(settings.name, settings.events)
        await self._notify(publisher, NOTICE_STARTED)
        invocations = 0
        while True:
            event = await api.next_event(extension_id)
            kind = event.kind
            if kind is None:
                logger.warning("Received unknown event type", extra={"event_type": event.event_type})
                continue
            await self._notify(publisher, notice_for(kind))
            if kind is ExtensionEventType.SHUTDOWN:
                return invocations
            invocations += 1

    async def _notify(self, publisher: Publisher, notice: str) -> None:
        try:
            await publisher.publish(self._settings.subject, notice.encode("utf-8"))
        except Exception as exc:  # noqa: BLE001
            logger.warning("Failed to publish notice", extra={"notice": notice, "error": str(exc)})


__all__ = ["NatsExtension"]
