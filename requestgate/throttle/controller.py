"""
Admission Controller

Gates outgoing requests by fingerprint recency and records their
completion. Plugs into a hook-capable HTTP client at two points:

- before dispatch: ``before_request`` admits the request or raises
  ThrottleRejectedException
- after completion: ``after_response`` / ``after_error`` mark the
  request's fingerprint as resolved

Decision procedure for a throttled request at time ``now``:

1. Drop resolved entries older than the window.
2. No entry for the fingerprint -> record it unresolved, admit.
3. Entry seen less than ``window`` ago -> reject "too-frequent"
   (whether or not it has resolved).
4. Entry outside the window but unresolved -> reject "duplicate-in-flight".
5. Otherwise -> overwrite the entry as a fresh admission, admit.

Rejections never touch the table.
"""

from __future__ import annotations

import logging
import threading
import time
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional

from requestgate.schemas.errors import (
    ErrorOrigin,
    RejectionKind,
    ThrottleRejectedException,
)
from requestgate.schemas.request import RequestConfig

from .fingerprint import Fingerprinter
from .table import ThrottleTable

if TYPE_CHECKING:
    from requestgate.http.client import HttpResponse

logger = logging.getLogger(__name__)

DEFAULT_THROTTLE_WINDOW_S = 0.3

Clock = Callable[[], float]


class AdmissionDecision(str, Enum):
    """Outcome of evaluating one request."""
    ADMIT = "admit"
    BYPASS = "bypass"
    TOO_FREQUENT = RejectionKind.TOO_FREQUENT.value
    DUPLICATE_IN_FLIGHT = RejectionKind.DUPLICATE_IN_FLIGHT.value

    @property
    def admitted(self) -> bool:
        return self in (AdmissionDecision.ADMIT, AdmissionDecision.BYPASS)


class ThrottleController:
    """
    Owns a ThrottleTable and applies the admission policy.

    Each instance is independent; tests create their own with a fake clock.

    Usage:
        controller = ThrottleController(window=0.3, base_url="https://api.example.com")
        controller.install(client)

        client.get("/blocks")   # admitted
        client.get("/blocks")   # ThrottleRejectedException: Too many requests
    """

    def __init__(
        self,
        *,
        window: float = DEFAULT_THROTTLE_WINDOW_S,
        clock: Optional[Clock] = None,
        base_url: str = "",
        table: Optional[ThrottleTable] = None,
    ) -> None:
        """
        Args:
            window: Throttle window in seconds
            clock: Monotonic time source in seconds (defaults to time.monotonic)
            base_url: Prefix stripped from URLs before fingerprinting
            table: Table to operate on (a fresh one by default)
        """
        if window < 0:
            raise ValueError(f"Throttle window must be non-negative, got {window}")
        self.window = window
        self.clock = clock or time.monotonic
        self.fingerprinter = Fingerprinter(base_url)
        self.table = table if table is not None else ThrottleTable()
        self._lock = threading.RLock()

    def fingerprint(self, request: RequestConfig) -> str:
        return self.fingerprinter.fingerprint(request)

    def evaluate(self, request: RequestConfig) -> tuple[AdmissionDecision, Optional[str]]:
        """
        Apply the admission policy, recording the request if admitted.

        Returns:
            (decision, fingerprint) - fingerprint is None for bypassed requests
        """
        if not request.throttle:
            return AdmissionDecision.BYPASS, None

        with self._lock:
            now = self.clock()
            removed = self.table.collect_garbage(now, self.window)
            if removed:
                logger.debug(f"Dropped {removed} stale throttle entries")

            key = self.fingerprint(request)
            entry = self.table.get(key)

            if entry is not None:
                if now - entry.timestamp < self.window:
                    return AdmissionDecision.TOO_FREQUENT, key
                if not entry.resolved:
                    return AdmissionDecision.DUPLICATE_IN_FLIGHT, key

            self.table.admit(key, now)
            return AdmissionDecision.ADMIT, key

    def before_request(self, request: RequestConfig) -> RequestConfig:
        """Pre-dispatch hook. Raises ThrottleRejectedException on rejection."""
        decision, key = self.evaluate(request)
        if decision.admitted:
            logger.debug(f"Admitted {request.method} {request.url} ({decision.value})")
            return request

        logger.info(f"Rejected {request.method} {request.url}: {decision.value}")
        raise ThrottleRejectedException(
            RejectionKind(decision.value),
            request=request,
            fingerprint=key,
        )

    def resolve(self, request: Optional[RequestConfig]) -> bool:
        """
        Mark the request's fingerprint as resolved.

        Returns:
            True if an entry was found and updated
        """
        if request is None or not request.throttle:
            return False
        with self._lock:
            key = self.fingerprint(request)
            found = self.table.mark_resolved(key)
        if found:
            logger.debug(f"Resolved {request.method} {request.url}")
        return found

    def after_response(self, response: "HttpResponse") -> "HttpResponse":
        """Post-dispatch hook for completed responses (any status code)."""
        self.resolve(response.request)
        return response

    def after_error(self, error: Any) -> None:
        """
        Post-dispatch hook for failures.

        Rejections raised by ``before_request`` never reached the transport,
        so they leave the table alone. The error itself is not modified.
        """
        origin = getattr(error, "origin", ErrorOrigin.TRANSPORT)
        if origin == ErrorOrigin.THROTTLE:
            return
        self.resolve(getattr(error, "request", None))

    def install(self, client: Any) -> "ThrottleController":
        """Register this controller's hooks on a hook-capable client."""
        client.add_request_hook(self.before_request)
        client.add_response_hook(self.after_response)
        client.add_error_hook(self.after_error)
        return self

    def reset(self) -> None:
        """Forget all recorded requests."""
        with self._lock:
            self.table.clear()
