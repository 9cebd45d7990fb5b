"""Run the ``lambda-nats`` group and turn every outcome into a process exit code."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from lambda_nats import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from lambda_nats.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    verbose = bool(lib_cli_exit_tools.config.traceback)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Execute the CLI and return its exit code instead of raising ``SystemExit``.

    Usage errors are printed by Click; anything else, including ``SystemExit``
    raised by commands, goes through ``lib_cli_exit_tools``. The lib_log_rich
    runtime is shut down afterwards when running on the main thread.

    Raises:
        ValueError: If services_factory is not provided.
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")
    from .root import cli

    saved = snapshot_traceback_state()
    try:
        cli.main(
            args=list(sys.argv[1:] if argv is None else argv),
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
        return 0
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001
        return _report_failure(exc)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
