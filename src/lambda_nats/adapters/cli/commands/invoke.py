"""Run the greeting handler once from the command line.

Contents:
    * :func:`cli_invoke` - Execute one invocation and print the greeting.
"""

from __future__ import annotations

import asyncio
import logging

import lib_log_rich.runtime
import rich_click as click

from lambda_nats.domain.errors import ConfigurationError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("invoke", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_invoke(ctx: click.Context) -> None:
    """Invoke the handler locally: wait, inspect the lock file, print the greeting.

    Use ``--set sentinel.path=...`` or ``--set sentinel.delay_ms=0`` on the
    root command to point at another file or skip the delay.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-invoke", extra={"command": "invoke"}):
        try:
            handler = cli_ctx.services.greeting_handler(cli_ctx.config)
        except ConfigurationError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc
        try:
            message = asyncio.run(handler.invoke())
        except PermissionError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.PERMISSION_DENIED) from exc
        cli_ctx.services.flush_logging()
        click.echo(message)


__all__ = ["cli_invoke"]
