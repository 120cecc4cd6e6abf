"""
Request Fingerprinting

Derives a stable identity string for a request from its method, target
path, query parameters and body. Two requests share a fingerprint if and
only if they share method and normalized path and have structurally equal
params and body (dict key order does not matter).

Format: ``METHOD:path:<body>:<query>``

Body and query keep separate slots, so a body of ``{"a":1}`` never
collides with a query of ``{"a":1}``.
"""

from __future__ import annotations

import re
from typing import Any

from requestgate.schemas.canonical import dumps_canonical
from requestgate.schemas.request import RequestConfig

FINGERPRINT_SEPARATOR = ":"

# Runs of slashes not preceded by ":" (keeps the "//" of "https://")
_DOUBLE_SLASH_RE = re.compile(r"(?<!:)/{2,}")


def serialize_value(value: Any) -> str:
    """
    Serialize a body or query value for fingerprinting.

    Strings are used verbatim, ``None`` becomes the empty string and
    everything else goes through cycle-safe canonical JSON. Never raises.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return dumps_canonical(value)


class Fingerprinter:
    """
    Builds request fingerprints relative to a base URL.

    Usage:
        fp = Fingerprinter(base_url="https://api.example.com/v1")
        key = fp.fingerprint(RequestConfig(method="GET", url="blocks"))
        # "GET:/blocks::"
    """

    def __init__(self, base_url: str = "") -> None:
        self.base_url = base_url or ""

    def normalize_path(self, url: str) -> str:
        """
        Strip the base URL prefix, collapse doubled path separators and
        give relative paths a single leading slash.
        """
        path = url or ""
        base = self.base_url.rstrip("/")
        if base and path.startswith(base):
            path = path[len(base):]
        path = _DOUBLE_SLASH_RE.sub("/", path)
        if "://" not in path and not path.startswith("/"):
            path = "/" + path
        return path

    def fingerprint(self, request: RequestConfig) -> str:
        """Compute the fingerprint of a request."""
        return FINGERPRINT_SEPARATOR.join([
            request.method.upper(),
            self.normalize_path(request.url),
            serialize_value(request.body),
            serialize_value(request.params),
        ])


def build_fingerprint(request: RequestConfig, base_url: str = "") -> str:
    """Convenience wrapper around ``Fingerprinter(base_url).fingerprint``."""
    return Fingerprinter(base_url).fingerprint(request)
