"""Cooperative delay with a guaranteed lower bound."""

from __future__ import annotations

import asyncio
import time


async def sleep_at_least(seconds: float) -> None:
    """Suspend the current task for no less than ``seconds`` of monotonic time.

    ``asyncio.sleep`` may wake up to one clock tick early, so the remainder is
    re-awaited until the deadline has really passed.

    Example:
        >>> import asyncio
        >>> asyncio.run(sleep_at_least(0))
    """
    deadline = time.monotonic() + seconds
    while (remaining := deadline - time.monotonic()) > 0:
        await asyncio.sleep(remaining)


__all__ = ["sleep_at_least"]
