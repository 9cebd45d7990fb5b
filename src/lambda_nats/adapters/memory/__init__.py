"""In-memory adapter implementations for testing.

Lightweight implementations of every application port -- no filesystem,
no NATS, no HTTP, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapters
    * :mod:`.sentinel` - Fake sentinel filesystem and sleep recorder
    * :mod:`.extension` - Publisher spy and scripted Extensions API
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .extension import PublisherSpy, ScriptedRuntimeApi
from .logging import flush_logging_in_memory, init_logging_in_memory
from .sentinel import FakeSentinelFilesystem, SleepRecorder

# Static conformance assertions
if TYPE_CHECKING:
    from lambda_nats.application.ports import (
        DisplayConfig,
        FlushLogging,
        GetConfig,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_flush_logging: FlushLogging = flush_logging_in_memory

__all__ = [
    "FakeSentinelFilesystem",
    "PublisherSpy",
    "ScriptedRuntimeApi",
    "SleepRecorder",
    "display_config_in_memory",
    "flush_logging_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
