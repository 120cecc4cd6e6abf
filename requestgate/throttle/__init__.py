"""
Throttle Module

Request fingerprinting and admission control for outgoing HTTP requests.
"""

from .controller import (
    DEFAULT_THROTTLE_WINDOW_S,
    AdmissionDecision,
    ThrottleController,
)
from .fingerprint import Fingerprinter, build_fingerprint, serialize_value
from .table import ThrottleEntry, ThrottleTable

__all__ = [
    "DEFAULT_THROTTLE_WINDOW_S",
    "AdmissionDecision",
    "ThrottleController",
    "Fingerprinter",
    "build_fingerprint",
    "serialize_value",
    "ThrottleEntry",
    "ThrottleTable",
]
