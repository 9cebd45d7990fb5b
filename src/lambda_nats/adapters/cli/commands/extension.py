"""Run the NATS lifecycle extension.

Contents:
    * :func:`cli_extension` - Register with the Extensions API and relay events until SHUTDOWN.
"""

from __future__ import annotations

import asyncio
import logging

import lib_log_rich.runtime
import rich_click as click

from lambda_nats.domain.errors import (
    ConfigurationError,
    ExtensionRegistrationError,
    PublisherError,
    RuntimeApiError,
)

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("extension", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_extension(ctx: click.Context) -> None:
    """Run as a Lambda extension (install this command under /opt/extensions).

    Requires ``AWS_LAMBDA_RUNTIME_API``; ``PEER_NATS_URL`` selects the NATS
    server (default ``nats://localhost:4222``).
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-extension", extra={"command": "extension"}):
        try:
            extension = cli_ctx.services.extension(cli_ctx.config)
            invocations = asyncio.run(extension.run())
        except ConfigurationError as exc:
            logger.error("Extension configuration invalid", extra={"error": str(exc)})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc
        except (PublisherError, ExtensionRegistrationError, RuntimeApiError) as exc:
            logger.error("Extension stopped", extra={"error": str(exc)})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.UNAVAILABLE) from exc
        logger.info("Extension exited after shutdown", extra={"invocations": invocations})


__all__ = ["cli_extension"]
