"""Clock adapter - event-loop friendly delays."""

from __future__ import annotations

from .sleep import sleep_at_least

__all__ = ["sleep_at_least"]
