"""Composition stories: production and in-memory wiring."""

from __future__ import annotations

import asyncio

import pytest
from lib_layered_config import Config

from lambda_nats.adapters.clock.sleep import sleep_at_least
from lambda_nats.adapters.filesystem.sentinel import read_sentinel_status, touch_sentinel
from lambda_nats.adapters.memory import PublisherSpy, ScriptedRuntimeApi, SleepRecorder
from lambda_nats.adapters.messaging.publisher import connect_publisher
from lambda_nats.adapters.runtime_api.client import open_runtime_api
from lambda_nats.composition import AppServices, build_production
from lambda_nats.domain.errors import ConfigurationError


@pytest.mark.os_agnostic
def test_build_production_wires_real_adapters() -> None:
    """Production services point at the filesystem, clock, NATS and HTTP adapters."""
    services = build_production()

    assert services.read_sentinel_status is read_sentinel_status
    assert services.touch_sentinel is touch_sentinel
    assert services.sleep is sleep_at_least
    assert services.connect_publisher is connect_publisher
    assert services.open_runtime_api is open_runtime_api


@pytest.mark.os_agnostic
def test_greeting_handler_reads_sentinel_section(testing_services: AppServices, sleeper: SleepRecorder) -> None:
    """The handler picks up path and delay from configuration."""
    config = Config({"sentinel": {"path": "/tmp/x.lock", "delay_ms": 250}}, {})

    message = asyncio.run(testing_services.greeting_handler(config).invoke())

    assert message == "Hello from Lambda!, the file /tmp/x.lock does not exist"
    assert sleeper.delays == [0.25]


@pytest.mark.os_agnostic
def test_extension_takes_runtime_api_from_environ(
    testing_services: AppServices,
    scripted_api: ScriptedRuntimeApi,
    publisher_spy: PublisherSpy,
) -> None:
    """The extension reads AWS_LAMBDA_RUNTIME_API and PEER_NATS_URL from the given mapping."""
    environ = {"AWS_LAMBDA_RUNTIME_API": "127.0.0.1:9001", "PEER_NATS_URL": "nats://10.0.0.5:4222"}

    asyncio.run(testing_services.extension(Config({}, {}), environ).run())

    assert scripted_api.opened[0]["runtime_api"] == "127.0.0.1:9001"
    assert publisher_spy.connections[0]["url"] == "nats://10.0.0.5:4222"


@pytest.mark.os_agnostic
def test_extension_without_runtime_api_is_rejected(testing_services: AppServices) -> None:
    """An empty environment cannot host the extension."""
    with pytest.raises(ConfigurationError, match="AWS_LAMBDA_RUNTIME_API"):
        testing_services.extension(Config({}, {}), {})
