"""Command-line adapter: the ``lambda-nats`` group, its commands, and ``main``."""

from __future__ import annotations

from .context import apply_traceback_preferences, restore_traceback_state, snapshot_traceback_state
from .main import main
from .root import cli

__all__ = [
    "apply_traceback_preferences",
    "cli",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
]
