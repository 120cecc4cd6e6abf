"""
Logging setup for applications embedding requestgate.

The library itself only emits through ``logging.getLogger(__name__)``
loggers under the ``requestgate`` namespace.
"""

from __future__ import annotations

import logging
import sys

from .runtime import get_default_config


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """
    Configure root logging with the package's standard format.

    Args:
        level: Log level name; defaults to the default config's log_level
            (REQUESTGATE_LOG_LEVEL)
        log_file: Also write to this file
    """
    if level is None:
        level = get_default_config().log_level
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )
