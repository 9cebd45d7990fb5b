"""Logging adapter - lib_log_rich setup.

Contents:
    * :func:`.setup.init_logging` - Idempotent logging initialization
    * :func:`.setup.flush_logging` - Flush queued records
"""

from __future__ import annotations

from .setup import flush_logging, init_logging

__all__ = ["flush_logging", "init_logging"]
