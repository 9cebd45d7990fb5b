"""In-memory logging adapters for testing."""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """No-op -- stdlib logging stays as pytest configured it, so caplog sees every record."""


def flush_logging_in_memory() -> None:
    """No-op -- nothing is queued."""


__all__ = ["flush_logging_in_memory", "init_logging_in_memory"]
