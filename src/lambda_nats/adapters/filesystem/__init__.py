"""Filesystem adapter - sentinel lock file status and creation."""

from __future__ import annotations

from .sentinel import read_sentinel_status, touch_sentinel

__all__ = ["read_sentinel_status", "touch_sentinel"]
