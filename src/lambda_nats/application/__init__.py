"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.handler` - :class:`GreetingHandler` use case
    * :mod:`.extension` - :class:`NatsExtension` use case
"""

from __future__ import annotations

from .extension import NatsExtension
from .handler import GreetingHandler
from .ports import (
    ConnectPublisher,
    DisplayConfig,
    FlushLogging,
    GetConfig,
    InitLogging,
    OpenRuntimeApi,
    Publisher,
    ReadSentinelStatus,
    RuntimeApi,
    Sleep,
    TouchSentinel,
)

__all__ = [
    "ConnectPublisher",
    "DisplayConfig",
    "FlushLogging",
    "GetConfig",
    "GreetingHandler",
    "InitLogging",
    "NatsExtension",
    "OpenRuntimeApi",
    "Publisher",
    "ReadSentinelStatus",
    "RuntimeApi",
    "Sleep",
    "TouchSentinel",
]
