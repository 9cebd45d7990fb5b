"""Runtime API adapter - Lambda Extensions API over httpx."""

from __future__ import annotations

from .client import ExtensionsApiClient, open_runtime_api

__all__ = ["ExtensionsApiClient", "open_runtime_api"]
