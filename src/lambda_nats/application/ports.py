"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol's ``__call__`` mirrors the signature of the adapter that
satisfies it, so plain module-level functions conform structurally (PEP 544).
Infrastructure types are imported under ``TYPE_CHECKING`` only.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import ExtensionEventType, OutputFormat
from ..domain.events import ExtensionEvent
from ..domain.sentinel import SentinelStatus

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class FlushLogging(Protocol):
    """Drain queued log records."""

    def __call__(self) -> None: ...


class ReadSentinelStatus(Protocol):
    """Snapshot the sentinel path; only a missing path is translated."""

    async def __call__(self, path: str) -> SentinelStatus: ...


class TouchSentinel(Protocol):
    """Create the sentinel file or refresh its mtime."""

    def __call__(self, path: str) -> None: ...


class Sleep(Protocol):
    """Suspend the current task for at least ``seconds``."""

    async def __call__(self, seconds: float) -> None: ...


class Publisher(Protocol):
    """An open connection that delivers lifecycle notices."""

    async def publish(self, subject: str, payload: bytes) -> None: ...
    async def close(self) -> None: ...


class ConnectPublisher(Protocol):
    """Open a :class:`Publisher`, retrying a bounded number of times."""

    async def __call__(self, url: str, *, attempts: int, interval: float, timeout: float) -> Publisher: ...


class RuntimeApi(Protocol):
    """The subset of the Lambda Extensions API an extension needs."""

    async def register(self, name: str, events: Sequence[ExtensionEventType]) -> str: ...
    async def next_event(self, extension_id: str) -> ExtensionEvent: ...
    async def aclose(self) -> None: ...


class OpenRuntimeApi(Protocol):
    """Create a :class:`RuntimeApi` client for an ``AWS_LAMBDA_RUNTIME_API`` address."""

    def __call__(self, runtime_api: str, *, timeout: float) -> RuntimeApi: ...


__all__ = [
    "ConnectPublisher",
    "DisplayConfig",
    "FlushLogging",
    "GetConfig",
    "InitLogging",
    "OpenRuntimeApi",
    "Publisher",
    "ReadSentinelStatus",
    "RuntimeApi",
    "Sleep",
    "TouchSentinel",
]
