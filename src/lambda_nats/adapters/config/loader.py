"""Layered configuration loading for the handler, the extension, and the CLI."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from lambda_nats import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Config loader callable that also exposes ``cache_clear``."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str) -> None:
    """Reject unsafe profile names before they become path segments.

    Raises:
        ValueError: For empty, overlong, reserved, or path-traversing names.

    Examples:
        >>> validate_profile("staging")

        >>> validate_profile("../../tmp")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../../tmp
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


def get_default_config_path() -> Path:
    """Return the ``defaultconfig.toml`` shipped inside the package.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# Warm invocations reuse the layers read by the first one.
@lru_cache(maxsize=4)
def _read_layers(*, profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load configuration: defaults -> app -> host -> user -> dotenv -> env.

    Args:
        profile: Optional profile name; inserts ``profile/<name>/`` into every
            configuration search path.
        start_dir: Directory that seeds ``.env`` discovery, defaults to CWD.

    Returns:
        Immutable configuration with provenance tracking.

    Example:
        >>> config = get_config()
        >>> config.get("sentinel.path")
        '/tmp/nats-extension.lock'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile=profile, start_dir=start_dir)


_get_config.cache_clear = _read_layers.cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
