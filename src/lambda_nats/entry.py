"""Console script entry point with production wiring.

Used by the ``lambda-nats`` console script, which is also the executable
dropped into ``/opt/extensions`` to run the extension.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Console script entry point with production services wired.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
