"""In-memory sentinel filesystem and clock for testing.

Contents:
    * :class:`FakeSentinelFilesystem` - scripted stat results and recorded touches.
    * :class:`SleepRecorder` - records requested delays and returns immediately.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ...domain.sentinel import SentinelStatus


def _empty_entries() -> dict[str, SentinelStatus]:
    return {}


def _empty_paths() -> list[str]:
    return []


def _empty_delays() -> list[float]:
    return []


@dataclass
class FakeSentinelFilesystem:
    """Filesystem double keyed by path.

    Example:
        >>> import asyncio
        >>> fs = FakeSentinelFilesystem()
        >>> fs.put_file("/tmp/a.lock", datetime(2024, 1, 1, tzinfo=timezone.utc))
        >>> asyncio.run(fs.read_sentinel_status("/tmp/a.lock")).is_regular_file
        True
        >>> asyncio.run(fs.read_sentinel_status("/tmp/b.lock")).exists
        False
    """

    entries: dict[str, SentinelStatus] = field(default_factory=_empty_entries)
    touched: list[str] = field(default_factory=_empty_paths)
    stat_calls: list[str] = field(default_factory=_empty_paths)
    raise_on_stat: OSError | None = None
    raise_on_touch: OSError | None = None

    def put_file(self, path: str, modified_at: datetime) -> None:
        self.entries[path] = SentinelStatus(path=path, exists=True, is_file=True, modified_at=modified_at)

    def put_directory(self, path: str) -> None:
        self.entries[path] = SentinelStatus(
            path=path, exists=True, is_file=False, modified_at=datetime.now(tz=timezone.utc)
        )

    async def read_sentinel_status(self, path: str) -> SentinelStatus:
        self.stat_calls.append(path)
        if self.raise_on_stat is not None:
            raise self.raise_on_stat
        return self.entries.get(path, SentinelStatus.missing(path))

    def touch_sentinel(self, path: str) -> None:
        if self.raise_on_touch is not None:
            raise self.raise_on_touch
        self.touched.append(path)
        self.put_file(path, datetime.now(tz=timezone.utc))


@dataclass
class SleepRecorder:
    """Sleep double that records each requested delay."""

    delays: list[float] = field(default_factory=_empty_delays)

    async def sleep(self, seconds: float) -> None:
        self.delays.append(seconds)


__all__ = ["FakeSentinelFilesystem", "SleepRecorder"]
