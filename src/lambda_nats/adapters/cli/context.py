"""Per-invocation CLI state shared between the root group and its commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from lambda_nats.composition import AppServices


@dataclass(slots=True)
class CLIContext:
    """What the root group resolved before dispatching: config, services, and flags."""

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(ctx: click.Context, **state: object) -> None:
    """Swap the services factory held in ``ctx.obj`` for a resolved :class:`CLIContext`."""
    ctx.obj = CLIContext(**state)  # type: ignore[arg-type]


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root group.

    Raises:
        RuntimeError: A command ran without passing through the root group.
    """
    if isinstance(ctx.obj, CLIContext):
        return ctx.obj
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Switch full, coloured tracebacks in ``lib_cli_exit_tools`` on or off.

    Example:
        >>> apply_traceback_preferences(False)
        >>> lib_cli_exit_tools.config.traceback
        False
    """
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


def snapshot_traceback_state() -> tuple[bool, bool]:
    """Return ``(traceback, traceback_force_color)`` as currently configured."""
    cfg = lib_cli_exit_tools.config
    return bool(cfg.traceback), bool(cfg.traceback_force_color)


def restore_traceback_state(state: tuple[bool, bool]) -> None:
    """Put back flags captured by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLIContext",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
