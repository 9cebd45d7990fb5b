"""``--set SECTION.KEY=VALUE`` parsing and merging into a Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` argument."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def coerce_value(raw: str) -> CoercedValue:
    """Decode ``raw`` as JSON, keeping it as a plain string when that fails.

    Examples:
        >>> coerce_value("250")
        250
        >>> coerce_value('["INVOKE"]')
        ['INVOKE']
        >>> coerce_value("nats://10.0.0.5:4222")
        'nats://10.0.0.5:4222'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` at the first ``=`` and the dots before it.

    Raises:
        ValueError: Missing ``=``, no dot in the key, or an empty component.

    Examples:
        >>> parse_override("sentinel.delay_ms=250")
        ConfigOverride(section='sentinel', key_path=('delay_ms',), value=250)
        >>> parse_override("extension.peer_nats_url=nats://a:4222?x=1").value
        'nats://a:4222?x=1'
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    key_path = tuple(rest.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def _merge_into(tree: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    node: dict[str, object] = tree.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        child = node.setdefault(part, {})
        if not isinstance(child, dict):
            raise ValueError(f"Override {override.section}.{'.'.join(override.key_path)} conflicts at {part!r}")
        node = cast("dict[str, object]", child)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` override deep-merged on top.

    The original object is returned untouched when there is nothing to apply.

    Raises:
        ValueError: If any override is malformed.

    Example:
        >>> base = Config({"sentinel": {"delay_ms": 1000}}, {})
        >>> apply_overrides(base, ("sentinel.delay_ms=0",))["sentinel"]["delay_ms"]
        0
    """
    if not raw_overrides:
        return config
    tree: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _merge_into(tree, parse_override(raw))
    return config.with_overrides(tree)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
