"""
HTTP Client Module

Hook-capable HTTP client and a factory that wires in admission control.
"""

from .client import HttpClient, HttpError, HttpResponse
from .factory import create_client

__all__ = [
    "HttpClient",
    "HttpError",
    "HttpResponse",
    "create_client",
]
