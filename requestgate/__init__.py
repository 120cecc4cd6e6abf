"""
requestgate

HTTP client wrapper that refuses duplicate and too-frequent requests
before they reach the network.
"""

from .config import RuntimeConfig, setup_logging
from .http import HttpClient, HttpError, HttpResponse, create_client
from .schemas import (
    ErrorOrigin,
    RejectionKind,
    RequestConfig,
    RequestGateException,
    ThrottleRejectedException,
)
from .throttle import ThrottleController, build_fingerprint

__version__ = "0.1.0"

__all__ = [
    "RuntimeConfig",
    "setup_logging",
    "HttpClient",
    "HttpError",
    "HttpResponse",
    "create_client",
    "ErrorOrigin",
    "RejectionKind",
    "RequestConfig",
    "RequestGateException",
    "ThrottleRejectedException",
    "ThrottleController",
    "build_fingerprint",
]
