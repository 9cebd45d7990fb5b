"""CLI command implementations.

Contents:
    * Info command from :mod:`.info`
    * Handler invocation from :mod:`.invoke`
    * Extension runner from :mod:`.extension`
    * Config display from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .extension import cli_extension
from .info import cli_info
from .invoke import cli_invoke

__all__ = [
    "cli_config",
    "cli_extension",
    "cli_info",
    "cli_invoke",
]
