"""
Schemas

Request descriptor, canonical serialization and the error taxonomy.
"""

from .canonical import (
    CANONICAL_JSON_SEPARATORS,
    CIRCULAR_MARKER,
    MAX_SAFE_INTEGER,
    canonical_equals,
    canonicalize_value,
    dumps_canonical,
    ensure_utc,
    format_datetime_canonical,
)
from .errors import (
    ConfigException,
    ErrorCodes,
    ErrorOrigin,
    RejectionKind,
    RequestGateError,
    RequestGateException,
    ThrottleRejectedException,
)
from .request import RequestConfig

__all__ = [
    # Canonical serialization
    "CANONICAL_JSON_SEPARATORS",
    "CIRCULAR_MARKER",
    "MAX_SAFE_INTEGER",
    "canonical_equals",
    "canonicalize_value",
    "dumps_canonical",
    "ensure_utc",
    "format_datetime_canonical",
    # Errors
    "ConfigException",
    "ErrorCodes",
    "ErrorOrigin",
    "RejectionKind",
    "RequestGateError",
    "RequestGateException",
    "ThrottleRejectedException",
    # Request descriptor
    "RequestConfig",
]
