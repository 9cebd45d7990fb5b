"""Sentinel file status value object."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class SentinelStatus:
    """Snapshot of the sentinel path taken at one point in time.

    Produced by the filesystem adapter; the handler only reads it.

    Attributes:
        path: The path that was inspected.
        exists: Whether anything exists at ``path``.
        is_file: Whether the entry is a regular file.
        modified_at: Last-modification time in UTC, ``None`` when absent.

    Example:
        >>> SentinelStatus.missing("/tmp/x.lock").is_regular_file
        False
    """

    path: str
    exists: bool
    is_file: bool = False
    modified_at: datetime | None = None

    @classmethod
    def missing(cls, path: str) -> SentinelStatus:
        """Build the status for a path that does not exist."""
        return cls(path=path, exists=False)

    @property
    def is_regular_file(self) -> bool:
        """True only for an existing regular file with a known mtime."""
        return self.exists and self.is_file and self.modified_at is not None


__all__ = ["SentinelStatus"]
