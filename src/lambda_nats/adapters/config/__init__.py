"""Configuration adapter - loading, typed settings, display, and overrides.

Contents:
    * :mod:`.loader` - Layered configuration loading with caching
    * :mod:`.settings` - Pydantic settings for the handler and the extension
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import ExtensionSettings, SentinelSettings, load_extension_settings, load_sentinel_settings

__all__ = [
    "ExtensionSettings",
    "SentinelSettings",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_extension_settings",
    "load_sentinel_settings",
]
