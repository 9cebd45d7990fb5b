"""Greeting use case executed once per Lambda invocation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..domain.behaviors import build_greeting
from .ports import ReadSentinelStatus, Sleep

if TYPE_CHECKING:
    from ..adapters.config.settings import SentinelSettings

logger = logging.getLogger(__name__)


class GreetingHandler:
    """Wait, inspect the sentinel file, and describe what was found.

    Holds no state between invocations; the same sentinel snapshot always
    yields the same string.

    Args:
        settings: Sentinel path and delay.
        read_sentinel_status: Port returning a snapshot of the path.
        sleep: Port implementing the cooperative delay.
    """

    def __init__(
        self,
        *,
        settings: SentinelSettings,
        read_sentinel_status: ReadSentinelStatus,
        sleep: Sleep,
    ) -> None:
        self._settings = settings
        self._read_sentinel_status = read_sentinel_status
        self._sleep = sleep

    async def invoke(self) -> str:
        """Return the greeting for the current sentinel state.

        A regular file produces the "last modified" wording and exactly one
        INFO record carrying the same text. A missing path, or one that is
        not a regular file, produces the "does not exist" wording and no log
        record.

        Raises:
            OSError: Any stat failure other than a missing path.
        """
        await self._sleep(self._settings.delay_seconds)
        status = await self._read_sentinel_status(self._settings.path)
        message = build_greeting(status)
        if status.is_regular_file:
            logger.info(message)
        return message


__all__ = ["GreetingHandler"]
