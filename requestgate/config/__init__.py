"""
Runtime Configuration Module

Configuration loading and logging setup.
"""

from .logging_config import setup_logging
from .runtime import (
    HttpConfig,
    RuntimeConfig,
    ThrottleConfig,
    get_default_config,
    set_default_config,
)

__all__ = [
    "HttpConfig",
    "RuntimeConfig",
    "ThrottleConfig",
    "get_default_config",
    "set_default_config",
    "setup_logging",
]
