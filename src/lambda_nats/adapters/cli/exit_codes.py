"""POSIX-conventional exit codes for CLI error paths.

Signal codes (130, 143) are informational; ``lib_cli_exit_tools`` performs
the signal-to-exit-code translation.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised via ``SystemExit`` by CLI commands.

    * 0–1: generic success / failure
    * 13: EACCES (sentinel not readable)
    * 22: EINVAL
    * 69: EX_UNAVAILABLE (NATS or Extensions API refused)
    * 78: EX_CONFIG (sysexits.h)
    * 128+N: signal N (informational only)

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    UNAVAILABLE = 69
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
