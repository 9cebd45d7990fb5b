"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from lib_layered_config import Config

# Timing and filesystem services
from ..adapters.clock.sleep import sleep_at_least

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.config.settings import load_extension_settings, load_sentinel_settings
from ..adapters.filesystem.sentinel import read_sentinel_status, touch_sentinel

# Logging services
from ..adapters.logging.setup import flush_logging, init_logging

# Extension services
from ..adapters.messaging.publisher import connect_publisher
from ..adapters.runtime_api.client import open_runtime_api
from ..application.extension import NatsExtension
from ..application.handler import GreetingHandler

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory import FakeSentinelFilesystem, PublisherSpy, ScriptedRuntimeApi, SleepRecorder
    from ..application.ports import (
        ConnectPublisher,
        DisplayConfig,
        FlushLogging,
        GetConfig,
        InitLogging,
        OpenRuntimeApi,
        ReadSentinelStatus,
        Sleep,
        TouchSentinel,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_flush_logging: FlushLogging = flush_logging
    _assert_read_sentinel_status: ReadSentinelStatus = read_sentinel_status
    _assert_touch_sentinel: TouchSentinel = touch_sentinel
    _assert_sleep: Sleep = sleep_at_least
    _assert_connect_publisher: ConnectPublisher = connect_publisher
    _assert_open_runtime_api: OpenRuntimeApi = open_runtime_api


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    flush_logging: FlushLogging
    read_sentinel_status: ReadSentinelStatus
    touch_sentinel: TouchSentinel
    sleep: Sleep
    connect_publisher: ConnectPublisher
    open_runtime_api: OpenRuntimeApi

    def greeting_handler(self, config: Config) -> GreetingHandler:
        """Assemble a :class:`GreetingHandler` from these services and the ``[sentinel]`` section.

        Raises:
            ConfigurationError: When ``[sentinel]`` is invalid.
        """
        return GreetingHandler(
            settings=load_sentinel_settings(config),
            read_sentinel_status=self.read_sentinel_status,
            sleep=self.sleep,
        )

    def extension(self, config: Config, environ: Mapping[str, str] | None = None) -> NatsExtension:
        """Assemble a :class:`NatsExtension` from these services, ``[extension]``, and the environment.

        Raises:
            ConfigurationError: When ``AWS_LAMBDA_RUNTIME_API`` is missing or a
                setting is invalid.
        """
        return NatsExtension(
            settings=load_extension_settings(config, environ),
            touch_sentinel=self.touch_sentinel,
            connect_publisher=self.connect_publisher,
            open_runtime_api=self.open_runtime_api,
        )


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        flush_logging=flush_logging,
        read_sentinel_status=read_sentinel_status,
        touch_sentinel=touch_sentinel,
        sleep=sleep_at_least,
        connect_publisher=connect_publisher,
        open_runtime_api=open_runtime_api,
    )


def build_testing(
    *,
    filesystem: FakeSentinelFilesystem | None = None,
    sleeper: SleepRecorder | None = None,
    publisher: PublisherSpy | None = None,
    runtime_api: ScriptedRuntimeApi | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Pass your own doubles to assert on what the use cases did; fresh ones
    are created for any left as ``None``.
    """
    from ..adapters.memory import (
        FakeSentinelFilesystem,
        PublisherSpy,
        ScriptedRuntimeApi,
        SleepRecorder,
        display_config_in_memory,
        flush_logging_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    fs = filesystem if filesystem is not None else FakeSentinelFilesystem()
    clock = sleeper if sleeper is not None else SleepRecorder()
    spy = publisher if publisher is not None else PublisherSpy()
    api = runtime_api if runtime_api is not None else ScriptedRuntimeApi()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        flush_logging=flush_logging_in_memory,
        read_sentinel_status=fs.read_sentinel_status,
        touch_sentinel=fs.touch_sentinel,
        sleep=clock.sleep,
        connect_publisher=spy.connect,
        open_runtime_api=api.open,
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    # Logging
    "init_logging",
    "flush_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
