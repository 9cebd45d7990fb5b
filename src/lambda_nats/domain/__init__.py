"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting wording and timestamp rendering
    * :mod:`.sentinel` - Sentinel file snapshot value object
    * :mod:`.events` - Extensions API events and lifecycle notices
    * :mod:`.enums` - Domain enumerations (OutputFormat, ExtensionEventType)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    DEFAULT_SENTINEL_PATH,
    GREETING_PREFIX,
    build_greeting,
    build_missing_greeting,
    build_modified_greeting,
    format_modified_at,
)
from .enums import ExtensionEventType, OutputFormat
from .errors import ConfigurationError, ExtensionRegistrationError, PublisherError, RuntimeApiError
from .events import NOTICE_INVOKED, NOTICE_SHUTDOWN, NOTICE_STARTED, ExtensionEvent, notice_for
from .sentinel import SentinelStatus

__all__ = [
    # Behaviors
    "DEFAULT_SENTINEL_PATH",
    "GREETING_PREFIX",
    "build_greeting",
    "build_missing_greeting",
    "build_modified_greeting",
    "format_modified_at",
    # Values
    "ExtensionEvent",
    "SentinelStatus",
    "NOTICE_INVOKED",
    "NOTICE_SHUTDOWN",
    "NOTICE_STARTED",
    "notice_for",
    # Enums
    "ExtensionEventType",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "ExtensionRegistrationError",
    "PublisherError",
    "RuntimeApiError",
]
