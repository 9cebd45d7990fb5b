"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from datetime import datetime, timezone

from .sentinel import SentinelStatus

GREETING_PREFIX = "Hello from Lambda!"
DEFAULT_SENTINEL_PATH = "/tmp/nats-extension.lock"  # noqa: S108


def format_modified_at(moment: datetime) -> str:
    """Render a timestamp as UTC ISO-8601 with seconds precision.

    Naive datetimes are taken to be UTC already.

    Example:
        >>> from datetime import datetime, timezone
        >>> format_modified_at(datetime(2024, 1, 1, tzinfo=timezone.utc))
        '2024-01-01T00:00:00Z'
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def build_modified_greeting(path: str, modified_at: datetime) -> str:
    """Return the greeting for a sentinel that is present.

    Example:
        >>> from datetime import datetime, timezone
        >>> build_modified_greeting("/tmp/a.lock", datetime(2024, 1, 1, tzinfo=timezone.utc))
        'Hello from Lambda!, the file /tmp/a.lock was last modified at 2024-01-01T00:00:00Z'
    """
    return f"{GREETING_PREFIX}, the file {path} was last modified at {format_modified_at(modified_at)}"


def build_missing_greeting(path: str) -> str:
    """Return the greeting for a sentinel that is absent.

    Example:
        >>> build_missing_greeting("/tmp/nats-extension.lock")
        'Hello from Lambda!, the file /tmp/nats-extension.lock does not exist'
    """
    return f"{GREETING_PREFIX}, the file {path} does not exist"


def build_greeting(status: SentinelStatus) -> str:
    r"""Select the greeting wording for a sentinel snapshot.

    Anything other than a regular file (a directory, a socket) gets the
    "does not exist" wording.

    Args:
        status: Snapshot produced by the filesystem adapter.

    Returns:
        The greeting string returned to the Lambda host.
    """
    if status.is_regular_file and status.modified_at is not None:
        return build_modified_greeting(status.path, status.modified_at)
    return build_missing_greeting(status.path)


__all__ = [
    "DEFAULT_SENTINEL_PATH",
    "GREETING_PREFIX",
    "build_greeting",
    "build_missing_greeting",
    "build_modified_greeting",
    "format_modified_at",
]
