"""Filesystem access to the sentinel lock file.

Contents:
    * :func:`read_sentinel_status` - stat the path off the event loop.
    * :func:`touch_sentinel` - create or refresh the lock file.
"""

from __future__ import annotations

import asyncio
import os
import stat
from datetime import datetime, timezone
from pathlib import Path

from lambda_nats.domain.sentinel import SentinelStatus


async def read_sentinel_status(path: str) -> SentinelStatus:
    """Return a snapshot of ``path``.

    Only a missing path is translated into a status. Every other ``OSError``
    (``PermissionError``, ``NotADirectoryError``, I/O errors) propagates to
    the caller unchanged.

    Args:
        path: Absolute path of the sentinel file.

    Returns:
        Snapshot with the mtime converted to an aware UTC datetime.

    Example:
        >>> import asyncio
        >>> asyncio.run(read_sentinel_status("/nonexistent/lambda-nats.lock")).exists
        False
    """
    try:
        st = await asyncio.to_thread(os.stat, path)
    except FileNotFoundError:
        return SentinelStatus.missing(path)
    return SentinelStatus(
        path=path,
        exists=True,
        is_file=stat.S_ISREG(st.st_mode),
        modified_at=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
    )


def touch_sentinel(path: str) -> None:
    """Create ``path`` or truncate it, leaving an empty file with a fresh mtime.

    Raises:
        OSError: When the file cannot be created.
    """
    Path(path).write_bytes(b"")


__all__ = ["read_sentinel_status", "touch_sentinel"]
