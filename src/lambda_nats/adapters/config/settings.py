"""Typed settings for the greeting handler and the NATS extension.

Provides Pydantic models validated at the configuration boundary and the
loaders that build them from a layered :class:`lib_layered_config.Config`.

Contents:
    * :class:`SentinelSettings` - ``[sentinel]`` section (path, delay).
    * :class:`ExtensionSettings` - ``[extension]`` section plus Lambda env vars.
    * :func:`load_sentinel_settings` / :func:`load_extension_settings`
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, cast
from urllib.parse import urlsplit

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from lambda_nats.domain.behaviors import DEFAULT_SENTINEL_PATH
from lambda_nats.domain.enums import ExtensionEventType
from lambda_nats.domain.errors import ConfigurationError

RUNTIME_API_ENV = "AWS_LAMBDA_RUNTIME_API"
PEER_NATS_URL_ENV = "PEER_NATS_URL"
DEFAULT_PEER_NATS_URL = "nats://localhost:4222"


class SentinelSettings(BaseModel):
    """Validated ``[sentinel]`` settings.

    Example:
        >>> settings = SentinelSettings()
        >>> settings.path
        '/tmp/nats-extension.lock'
        >>> settings.delay_seconds
        1.0
    """

    model_config = ConfigDict(frozen=True)

    path: str = DEFAULT_SENTINEL_PATH
    delay_ms: int = Field(default=1000, ge=0)

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000


class ExtensionSettings(BaseModel):
    """Validated ``[extension]`` settings.

    ``runtime_api`` has no default: it comes from ``AWS_LAMBDA_RUNTIME_API``
    inside a Lambda execution environment.

    Example:
        >>> settings = ExtensionSettings(runtime_api="127.0.0.1:9001")
        >>> settings.name
        'nats-extension'
        >>> settings.events
        [<ExtensionEventType.INVOKE: 'INVOKE'>, <ExtensionEventType.SHUTDOWN: 'SHUTDOWN'>]
    """

    model_config = ConfigDict(frozen=True)

    runtime_api: str
    name: str = "nats-extension"
    events: list[ExtensionEventType] = Field(
        default_factory=lambda: [ExtensionEventType.INVOKE, ExtensionEventType.SHUTDOWN]
    )
    subject: str = "lambda"
    peer_nats_url: str = DEFAULT_PEER_NATS_URL
    lock_path: str = DEFAULT_SENTINEL_PATH
    connect_attempts: int = Field(default=50, ge=1)
    connect_interval_ms: int = Field(default=100, ge=0)
    request_timeout: float = Field(default=10.0, gt=0)

    @field_validator("runtime_api", mode="before")
    @classmethod
    def _require_runtime_api(cls, v: Any) -> Any:
        """Reject empty strings so a blank env var counts as unset."""
        if isinstance(v, str) and not v.strip():
            raise ValueError(f"{RUNTIME_API_ENV} environment variable is not set")
        return v

    @field_validator("peer_nats_url")
    @classmethod
    def _validate_peer_url(cls, v: str) -> str:
        """Accept only URLs with a scheme and a host.

        Examples:
            >>> ExtensionSettings._validate_peer_url("nats://10.0.0.5:4222")
            'nats://10.0.0.5:4222'
        """
        parts = urlsplit(v)
        if not parts.scheme or not parts.hostname:
            raise ValueError(f"Invalid {PEER_NATS_URL_ENV}: {v!r}")
        return v

    @property
    def connect_interval_seconds(self) -> float:
        return self.connect_interval_ms / 1000


def _section(config: Config, name: str) -> dict[str, Any]:
    raw: object = config.get(name, default={})
    if not raw:
        return {}
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"[{name}] must be a table, got {type(raw).__name__}")
    return dict(cast("Mapping[str, Any]", raw))


def load_sentinel_settings(config: Config) -> SentinelSettings:
    """Build :class:`SentinelSettings` from the ``[sentinel]`` section.

    Raises:
        ConfigurationError: When the section holds invalid values.

    Example:
        >>> load_sentinel_settings(Config({"sentinel": {"delay_ms": 5}}, {})).delay_ms
        5
    """
    try:
        return SentinelSettings.model_validate(_section(config, "sentinel"))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [sentinel] configuration: {exc}") from exc


def load_extension_settings(config: Config, environ: Mapping[str, str] | None = None) -> ExtensionSettings:
    """Build :class:`ExtensionSettings` from ``[extension]`` and the Lambda environment.

    ``AWS_LAMBDA_RUNTIME_API`` and ``PEER_NATS_URL`` take precedence over
    the configuration file. The lock path follows ``[sentinel].path`` unless
    ``[extension].lock_path`` is set, so the extension touches the file the
    handler reads.

    Args:
        config: Already-loaded layered configuration.
        environ: Environment mapping, defaults to ``os.environ``.

    Raises:
        ConfigurationError: When the runtime API address is missing or any
            value fails validation.

    Example:
        >>> settings = load_extension_settings(Config({}, {}), {"AWS_LAMBDA_RUNTIME_API": "127.0.0.1:9001"})
        >>> settings.peer_nats_url
        'nats://localhost:4222'
    """
    env = os.environ if environ is None else environ
    data = _section(config, "extension")
    data.setdefault("lock_path", _section(config, "sentinel").get("path", DEFAULT_SENTINEL_PATH))
    if env.get(RUNTIME_API_ENV) is not None:
        data["runtime_api"] = env[RUNTIME_API_ENV]
    if env.get(PEER_NATS_URL_ENV):
        data["peer_nats_url"] = env[PEER_NATS_URL_ENV]
    if not data.get("runtime_api"):
        raise ConfigurationError(f"{RUNTIME_API_ENV} environment variable is not set")
    try:
        return ExtensionSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [extension] configuration: {exc}") from exc


__all__ = [
    "DEFAULT_PEER_NATS_URL",
    "PEER_NATS_URL_ENV",
    "RUNTIME_API_ENV",
    "ExtensionSettings",
    "SentinelSettings",
    "load_extension_settings",
    "load_sentinel_settings",
]
