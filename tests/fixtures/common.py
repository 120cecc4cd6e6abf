"""
Common test fixtures shared by all modules.

Provides factory functions and fakes for:
- RequestConfig
- A controllable clock
- A requests.Session stand-in
"""

from datetime import timedelta
from typing import Any, Optional
from unittest.mock import Mock

import requests

from requestgate.schemas.request import RequestConfig


class FakeClock:
    """Manually advanced clock, in seconds."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float = 0.0, *, ms: float = 0.0) -> float:
        self.now += seconds + ms / 1000.0
        return self.now


def make_request(
    method: str = "GET",
    url: str = "/blocks",
    **overrides: Any,
) -> RequestConfig:
    """Create a RequestConfig with sensible defaults."""
    return RequestConfig(method=method, url=url, **overrides)


def make_raw_response(
    status_code: int = 200,
    content: bytes = b'{"ok": true}',
    url: str = "https://api.example.com/blocks",
    headers: Optional[dict[str, str]] = None,
) -> Mock:
    """Mimic the bits of requests.Response that HttpClient reads."""
    response = Mock()
    response.status_code = status_code
    response.content = content
    response.url = url
    response.headers = headers or {"content-type": "application/json"}
    response.elapsed = timedelta(milliseconds=12)
    return response


def make_session(
    response: Optional[Mock] = None,
    error: Optional[Exception] = None,
) -> Mock:
    """Create a Mock session whose request() returns a response or raises."""
    session = Mock(spec=requests.Session)
    if error is not None:
        session.request.side_effect = error
    else:
        session.request.return_value = response or make_raw_response()
    return session
