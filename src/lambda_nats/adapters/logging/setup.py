"""Centralized lib_log_rich initialization for the CLI and the Lambda entry point.

Contents:
    * :class:`LoggingConfigModel` - validates the ``[lib_log_rich]`` section.
    * :func:`init_logging` - idempotent runtime initialization.
    * :func:`flush_logging` - drain queued records before the host freezes the sandbox.
"""

from __future__ import annotations

from typing import IO, cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from lib_log_rich.adapters import RichConsoleAdapter
from lib_log_rich.runtime import ConsoleAppearance
from pydantic import BaseModel, ConfigDict
from rich.console import Console

from lambda_nats import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` section.

    Extra keys pass through unchanged to ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel(service="handler").environment
        'prod'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def single_line_console(appearance: ConsoleAppearance) -> RichConsoleAdapter:
    """Build the stock Rich console adapter with soft wrapping enabled.

    Each record stays on one output line whatever the console width; Lambda
    forwards stderr one line per log event. ``stream = "both"`` keeps the
    stock console.

    Example:
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> adapter = single_line_console(ConsoleAppearance(stream="custom", stream_target=buffer))
        >>> callable(adapter.emit)
        True
    """
    stream = appearance.stream
    options = {
        "styles": appearance.styles,
        "format_preset": appearance.format_preset,
        "format_template": appearance.format_template,
        "force_color": appearance.force_color,
        "no_color": appearance.no_color,
    }
    if stream == "both":
        return RichConsoleAdapter(stream=stream, **options)  # type: ignore[arg-type]
    console = Console(
        file=cast("IO[str]", appearance.stream_target) if stream == "custom" else None,
        stderr=stream == "stderr",
        quiet=stream == "none",
        force_terminal=appearance.force_color,
        no_color=appearance.no_color,
        soft_wrap=True,
    )
    return RichConsoleAdapter(console=console, **options)  # type: ignore[arg-type]


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map ``[lib_log_rich]`` onto a RuntimeConfig, defaulting the service name to the package."""
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    extra_config.setdefault("console_adapter_factory", single_line_console)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize lib_log_rich once per process and bridge stdlib logging into it.

    Warm Lambda invocations and nested CLI calls reach this again; those
    calls return immediately. ``.env`` files are loaded on the first call so
    ``LOG_*`` variables take effect.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


def flush_logging() -> None:
    """Flush pending records when the runtime is up; no-op otherwise."""
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()


__all__ = [
    "LoggingConfigModel",
    "flush_logging",
    "init_logging",
    "single_line_console",
]
