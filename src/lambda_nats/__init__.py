"""Public package surface exposing the Lambda handler, greeting wording, and configuration.

Routes imports through the architectural layers:
- Domain exports: greeting wording and sentinel defaults
- Composition exports: wired adapter services (configuration)
- Entry points: the Lambda handler
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    DEFAULT_SENTINEL_PATH,
    GREETING_PREFIX,
    build_greeting,
)

# Lambda entry point
from .lambda_function import hello_from_lambda_handler

__all__ = [
    "DEFAULT_SENTINEL_PATH",
    "GREETING_PREFIX",
    "build_greeting",
    "get_config",
    "hello_from_lambda_handler",
    "print_info",
]
