"""Typed settings stories: defaults, environment precedence, validation."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from lambda_nats.adapters.config.settings import (
    ExtensionSettings,
    load_extension_settings,
    load_sentinel_settings,
)
from lambda_nats.domain.enums import ExtensionEventType
from lambda_nats.domain.errors import ConfigurationError

LAMBDA_ENV = {"AWS_LAMBDA_RUNTIME_API": "127.0.0.1:9001"}


@pytest.mark.os_agnostic
def test_sentinel_settings_default_to_the_lambda_contract(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Without a section the default path and one second delay apply."""
    settings = load_sentinel_settings(config_factory({}))

    assert settings.path == "/tmp/nats-extension.lock"
    assert settings.delay_seconds == 1.0


@pytest.mark.os_agnostic
def test_sentinel_settings_reject_negative_delay(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Validation failures surface as ConfigurationError."""
    with pytest.raises(ConfigurationError, match=r"\[sentinel\]"):
        load_sentinel_settings(config_factory({"sentinel": {"delay_ms": -1}}))


@pytest.mark.os_agnostic
def test_sentinel_section_must_be_a_table(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """A scalar where a table belongs is a configuration error."""
    with pytest.raises(ConfigurationError, match="must be a table"):
        load_sentinel_settings(config_factory({"sentinel": "oops"}))


@pytest.mark.os_agnostic
def test_extension_settings_defaults_match_the_original_extension(
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    """Name, events, subject, peer URL, and retry budget default sensibly."""
    settings = load_extension_settings(config_factory({}), LAMBDA_ENV)

    assert settings.runtime_api == "127.0.0.1:9001"
    assert settings.name == "nats-extension"
    assert settings.events == [ExtensionEventType.INVOKE, ExtensionEventType.SHUTDOWN]
    assert settings.subject == "lambda"
    assert settings.peer_nats_url == "nats://localhost:4222"
    assert settings.connect_attempts == 50
    assert settings.connect_interval_seconds == pytest.approx(0.1)
    assert settings.lock_path == "/tmp/nats-extension.lock"


@pytest.mark.os_agnostic
def test_missing_runtime_api_is_a_configuration_error(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """The extension cannot run outside Lambda without an API address."""
    with pytest.raises(ConfigurationError, match="AWS_LAMBDA_RUNTIME_API"):
        load_extension_settings(config_factory({}), {})


@pytest.mark.os_agnostic
def test_blank_runtime_api_counts_as_missing(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """An empty env var does not satisfy the requirement."""
    with pytest.raises(ConfigurationError, match="AWS_LAMBDA_RUNTIME_API"):
        load_extension_settings(config_factory({"extension": {"runtime_api": "x:1"}}), {"AWS_LAMBDA_RUNTIME_API": ""})


@pytest.mark.os_agnostic
def test_peer_nats_url_env_overrides_configuration(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """PEER_NATS_URL wins over ``[extension].peer_nats_url``."""
    config = config_factory({"extension": {"peer_nats_url": "nats://config:4222"}})

    settings = load_extension_settings(config, {**LAMBDA_ENV, "PEER_NATS_URL": "nats://10.0.0.5:4222"})

    assert settings.peer_nats_url == "nats://10.0.0.5:4222"


@pytest.mark.os_agnostic
def test_invalid_peer_url_is_rejected(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """A URL without scheme or host cannot be dialled."""
    with pytest.raises(ConfigurationError, match="PEER_NATS_URL"):
        load_extension_settings(config_factory({}), {**LAMBDA_ENV, "PEER_NATS_URL": "not a url"})


@pytest.mark.os_agnostic
def test_lock_path_follows_sentinel_path(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Extension and handler agree on the lock file unless told otherwise."""
    config = config_factory({"sentinel": {"path": "/tmp/custom.lock"}})

    assert load_extension_settings(config, LAMBDA_ENV).lock_path == "/tmp/custom.lock"


@pytest.mark.os_agnostic
def test_explicit_lock_path_wins_over_sentinel_path(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """``[extension].lock_path`` is taken as-is."""
    config = config_factory({"sentinel": {"path": "/tmp/a.lock"}, "extension": {"lock_path": "/tmp/b.lock"}})

    assert load_extension_settings(config, LAMBDA_ENV).lock_path == "/tmp/b.lock"


@pytest.mark.os_agnostic
def test_unknown_event_type_in_configuration_is_rejected(config_factory: Callable[[dict[str, Any]], Config]) -> None:
    """Only INVOKE and SHUTDOWN may be registered."""
    with pytest.raises(ConfigurationError, match=r"\[extension\]"):
        load_extension_settings(config_factory({"extension": {"events": ["INVOKE", "BOGUS"]}}), LAMBDA_ENV)


@pytest.mark.os_agnostic
def test_extension_settings_are_frozen() -> None:
    """Settings cannot be mutated after validation."""
    settings = ExtensionSettings(runtime_api="127.0.0.1:9001")

    with pytest.raises(ValueError):
        settings.subject = "other"  # type: ignore[misc]
