"""Lambda Extensions API event values and the lifecycle notices they trigger."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

from .enums import ExtensionEventType

NOTICE_STARTED: Final[str] = "Extension started"
NOTICE_INVOKED: Final[str] = "Function invoked"
NOTICE_SHUTDOWN: Final[str] = "Extension shutting down"


@dataclass(frozen=True, slots=True)
class ExtensionEvent:
    """One event returned by ``/extension/event/next``.

    ``event_type`` keeps the raw string so unknown types can be logged as-is.

    Example:
        >>> event = ExtensionEvent.from_payload({"eventType": "INVOKE", "requestId": "r-1"})
        >>> event.kind is ExtensionEventType.INVOKE
        True
        >>> ExtensionEvent.from_payload({"eventType": "RESTORE"}).kind is None
        True
    """

    event_type: str
    request_id: str | None = None
    deadline_ms: int | None = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> ExtensionEvent:
        """Build an event from the decoded JSON body."""
        return cls(
            event_type=str(payload.get("eventType", "")),
            request_id=payload.get("requestId"),
            deadline_ms=_deadline_ms(payload.get("deadlineMs")),
        )

    @property
    def kind(self) -> ExtensionEventType | None:
        """Known event type, or ``None`` for anything the extension did not register for."""
        try:
            return ExtensionEventType(self.event_type)
        except ValueError:
            return None


def _deadline_ms(value: Any) -> int | None:
    """Return ``deadlineMs`` as an int, or ``None`` when it is absent or not a number.

    Examples:
        >>> _deadline_ms("1704067200000")
        1704067200000
        >>> _deadline_ms("soon") is None
        True
    """
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def notice_for(kind: ExtensionEventType) -> str:
    """Return the lifecycle notice published for a known event type.

    Example:
        >>> notice_for(ExtensionEventType.SHUTDOWN)
        'Extension shutting down'
    """
    if kind is ExtensionEventType.INVOKE:
        return NOTICE_INVOKED
    return NOTICE_SHUTDOWN


__all__ = [
    "NOTICE_INVOKED",
    "NOTICE_SHUTDOWN",
    "NOTICE_STARTED",
    "ExtensionEvent",
    "notice_for",
]
