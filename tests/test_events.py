"""Extensions API event values and lifecycle notices."""

from __future__ import annotations

import pytest

from lambda_nats.domain.enums import ExtensionEventType
from lambda_nats.domain.events import (
    NOTICE_INVOKED,
    NOTICE_SHUTDOWN,
    ExtensionEvent,
    notice_for,
)


@pytest.mark.os_agnostic
def test_from_payload_reads_invoke_fields() -> None:
    """Known fields of an INVOKE body are captured."""
    event = ExtensionEvent.from_payload({"eventType": "INVOKE", "requestId": "r-1", "deadlineMs": 1700000000000})

    assert event.kind is ExtensionEventType.INVOKE
    assert event.request_id == "r-1"
    assert event.deadline_ms == 1700000000000


@pytest.mark.os_agnostic
def test_from_payload_keeps_unknown_event_type_verbatim() -> None:
    """Unregistered types keep their raw name and have no kind."""
    event = ExtensionEvent.from_payload({"eventType": "RESTORE"})

    assert event.event_type == "RESTORE"
    assert event.kind is None


@pytest.mark.os_agnostic
def test_from_payload_without_event_type_has_no_kind() -> None:
    """An empty body yields an event nobody handles."""
    assert ExtensionEvent.from_payload({}).kind is None


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("kind", "notice"),
    [(ExtensionEventType.INVOKE, NOTICE_INVOKED), (ExtensionEventType.SHUTDOWN, NOTICE_SHUTDOWN)],
)
def test_notice_for_maps_each_event_type(kind: ExtensionEventType, notice: str) -> None:
    """Each registered event has its own notice text."""
    assert notice_for(kind) == notice


@pytest.mark.os_agnostic
@pytest.mark.parametrize("deadline", ["soon", None, {"ms": 5}, True])
def test_from_payload_ignores_unusable_deadline(deadline: object) -> None:
    """A deadline that is not a number is dropped instead of failing the event."""
    event = ExtensionEvent.from_payload({"eventType": "INVOKE", "deadlineMs": deadline})

    assert event.kind is ExtensionEventType.INVOKE
    assert event.deadline_ms is None
