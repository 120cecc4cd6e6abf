"""
Test fixtures package for requestgate tests.

Usage:
    from fixtures import FakeClock, make_request, make_session

    def test_something():
        clock = FakeClock()
        request = make_request("POST", "/tx", json_body={"a": 1})
"""

from .common import (
    FakeClock,
    make_raw_response,
    make_request,
    make_session,
)

__all__ = [
    "FakeClock",
    "make_raw_response",
    "make_request",
    "make_session",
]
