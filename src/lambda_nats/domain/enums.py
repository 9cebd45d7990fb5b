"""Type-safe domain enums for output formats and extension events."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class ExtensionEventType(str, Enum):
    """Lambda Extensions API event types the extension registers for.

    Example:
        >>> ExtensionEventType("SHUTDOWN") is ExtensionEventType.SHUTDOWN
        True
    """

    INVOKE = "INVOKE"
    SHUTDOWN = "SHUTDOWN"


__all__ = [
    "ExtensionEventType",
    "OutputFormat",
]
