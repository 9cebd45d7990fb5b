"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Configuration loading, typed settings, and display
    * :mod:`.filesystem` - Sentinel lock file access
    * :mod:`.clock` - Delays with a guaranteed lower bound
    * :mod:`.runtime_api` - Lambda Extensions API client (httpx)
    * :mod:`.messaging` - NATS publishing (nats-py)
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory doubles for every port
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
