"""AWS Lambda entry point with production wiring.

Configure the function with ``Handler: lambda_nats.lambda_function.hello_from_lambda_handler``.

System Role:
    Sits at package level (beside :mod:`.entry`) so the composition root can
    be wired without the adapters layer importing it.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

from .composition import AppServices, build_production


def hello_from_lambda_handler(
    event: Any = None,
    context: Any = None,
    *,
    services_factory: Callable[[], AppServices] = build_production,
) -> str:
    """Return the sentinel greeting for one invocation.

    ``event`` and ``context`` are accepted for the Lambda calling convention
    and ignored. Nothing is caught here: any fault surfaces to the Lambda
    host as an invocation error.

    Args:
        event: Invocation payload (unused).
        context: Lambda context object (unused).
        services_factory: Factory returning AppServices; tests pass ``build_testing``.

    Returns:
        One of the two greeting strings.
    """
    services = services_factory()
    config = services.get_config()
    services.init_logging(config)
    try:
        return asyncio.run(services.greeting_handler(config).invoke())
    finally:
        services.flush_logging()


__all__ = ["hello_from_lambda_handler"]
