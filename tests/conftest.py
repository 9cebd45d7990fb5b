"""Shared pytest fixtures for handler, extension, and CLI tests.

Centralizes test infrastructure:
- In-memory doubles come from :mod:`lambda_nats.adapters.memory`
- CLI tests receive a services factory through ``obj=``
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from lambda_nats.adapters.memory import FakeSentinelFilesystem, PublisherSpy, ScriptedRuntimeApi, SleepRecorder

if TYPE_CHECKING:
    from lambda_nats.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test."""
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache so each test reads configuration afresh."""
    from lambda_nats.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory."""
    from lambda_nats.composition import build_production

    return build_production


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def fake_filesystem() -> FakeSentinelFilesystem:
    """Sentinel filesystem double with nothing on it."""
    return FakeSentinelFilesystem()


@pytest.fixture
def sleeper() -> SleepRecorder:
    """Sleep double recording each delay."""
    return SleepRecorder()


@pytest.fixture
def publisher_spy() -> PublisherSpy:
    """NATS publisher double capturing notices."""
    return PublisherSpy()


@pytest.fixture
def scripted_api() -> ScriptedRuntimeApi:
    """Extensions API double that delivers one INVOKE and then SHUTDOWN."""
    return ScriptedRuntimeApi.from_types("INVOKE", "SHUTDOWN")


@pytest.fixture
def testing_services(
    fake_filesystem: FakeSentinelFilesystem,
    sleeper: SleepRecorder,
    publisher_spy: PublisherSpy,
    scripted_api: ScriptedRuntimeApi,
) -> AppServices:
    """In-memory services sharing the doubles exposed by the fixtures above."""
    from lambda_nats.composition import build_testing

    return build_testing(
        filesystem=fake_filesystem,
        sleeper=sleeper,
        publisher=publisher_spy,
        runtime_api=scripted_api,
    )


@pytest.fixture
def inject_config(
    clear_config_cache: None,
    testing_services: AppServices,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory producing CLI services that load ``config`` and use in-memory doubles.

    Logging and display stay on the production adapters because CLI
    commands bind lib_log_rich context and render real output.

    Example:
        def test_invoke(cli_runner, config_factory, inject_config) -> None:
            factory = inject_config(config_factory({"sentinel": {"delay_ms": 0}}))
            result = cli_runner.invoke(cli, ["invoke"], obj=factory)
    """
    from lambda_nats.adapters.config.display import display_config
    from lambda_nats.adapters.logging.setup import flush_logging, init_logging

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = dataclasses.replace(
            testing_services,
            get_config=_fake_get_config,
            display_config=display_config,
            init_logging=init_logging,
            flush_logging=flush_logging,
        )
        return lambda: services

    return _inject
