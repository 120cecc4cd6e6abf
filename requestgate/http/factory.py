"""
Client Factory

Builds a configured HttpClient with admission control installed.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests

from requestgate.config.runtime import RuntimeConfig, get_default_config
from requestgate.throttle.controller import Clock, ThrottleController

from .client import HttpClient

logger = logging.getLogger(__name__)


def create_client(
    config: Optional[RuntimeConfig] = None,
    *,
    clock: Optional[Clock] = None,
    controller: Optional[ThrottleController] = None,
    session: Optional[requests.Session] = None,
) -> HttpClient:
    """
    Create an HttpClient from runtime configuration.

    Args:
        config: Runtime configuration (defaults to get_default_config())
        clock: Time source for a newly built controller
        controller: Use this controller instead of building one
        session: Pre-built requests session

    Returns:
        HttpClient with the controller reachable as ``client.throttle``
        (None when throttling is disabled and no controller was given)
    """
    config = config or get_default_config()
    http = config.http

    client = HttpClient(
        base_url=http.base_url,
        timeout=http.timeout,
        default_headers={"User-Agent": http.user_agent, **http.default_headers},
        proxy=http.proxy,
        auth_token=http.auth_token,
        auth_header=http.auth_header,
        auth_scheme=http.auth_scheme,
        session=session,
    )

    if controller is None and config.throttle.enabled:
        controller = ThrottleController(
            window=config.throttle.window_seconds,
            clock=clock,
            base_url=http.base_url,
        )

    if controller is not None:
        controller.install(client)
        client.throttle = controller
        logger.debug(f"Admission control installed (window={controller.window}s)")

    return client
