"""
Schemas & Errors
File: errors.py

Purpose: Error taxonomy for the throttled HTTP client.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.

Every exception carries an explicit ``origin`` discriminant so hooks can
tell requests rejected before dispatch apart from transport failures
without type-testing the raised value.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .request import RequestConfig


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Admission errors
    THROTTLE_TOO_FREQUENT = "THROTTLE_TOO_FREQUENT"
    THROTTLE_DUPLICATE_IN_FLIGHT = "THROTTLE_DUPLICATE_IN_FLIGHT"

    # Transport errors
    TRANSPORT_ERROR = "TRANSPORT_ERROR"
    HTTP_STATUS_ERROR = "HTTP_STATUS_ERROR"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"


class ErrorOrigin(str, Enum):
    """Where an error was produced in the request lifecycle."""

    THROTTLE = "throttle-rejected"
    TRANSPORT = "transport-failed"
    CONFIG = "config-invalid"


class RejectionKind(str, Enum):
    """Why the admission controller refused a request."""

    TOO_FREQUENT = "too-frequent"
    DUPLICATE_IN_FLIGHT = "duplicate-in-flight"


REJECTION_MESSAGES: dict[RejectionKind, str] = {
    RejectionKind.TOO_FREQUENT: "Too many requests",
    RejectionKind.DUPLICATE_IN_FLIGHT: "Repeated requests",
}

REJECTION_CODES: dict[RejectionKind, str] = {
    RejectionKind.TOO_FREQUENT: ErrorCodes.THROTTLE_TOO_FREQUENT,
    RejectionKind.DUPLICATE_IN_FLIGHT: ErrorCodes.THROTTLE_DUPLICATE_IN_FLIGHT,
}


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class RequestGateError(BaseModel):
    """
    Structured error model.

    Used for passing errors around (logging, API responses, test
    assertions) without raising.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.THROTTLE_TOO_FREQUENT],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    origin: ErrorOrigin = Field(
        ...,
        description="Lifecycle stage that produced the error",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the caller may retry the operation",
    )

    def to_exception(self) -> "RequestGateException":
        """Convert this error model to a raisable exception."""
        return RequestGateException(
            message=self.message,
            code=self.code,
            origin=self.origin,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class RequestGateException(Exception):
    """
    Base exception for all requestgate errors.

    Carries structured error information plus the request configuration
    that produced it (when there is one).
    """

    def __init__(
        self,
        message: str,
        code: str = "REQUESTGATE_ERROR",
        origin: ErrorOrigin = ErrorOrigin.TRANSPORT,
        details: dict[str, Any] | None = None,
        retryable: bool = False,
        request: "RequestConfig | None" = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.origin = origin
        self.details = details or {}
        self.retryable = retryable
        self.request = request

    @property
    def is_throttle_rejection(self) -> bool:
        """True if the request was refused before it was dispatched."""
        return self.origin == ErrorOrigin.THROTTLE

    def to_error_model(self) -> RequestGateError:
        """Convert this exception to a RequestGateError model."""
        return RequestGateError(
            code=self.code,
            message=self.message,
            origin=self.origin,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(code={self.code!r}, "
            f"origin={self.origin.value!r}, message={self.message!r})"
        )


class ThrottleRejectedException(RequestGateException):
    """
    Raised by the admission controller when a request is refused.

    The request never reached the transport. No retry happens at this
    layer; the caller may retry manually.
    """

    def __init__(
        self,
        kind: RejectionKind,
        request: "RequestConfig | None" = None,
        fingerprint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = dict(details or {})
        full_details["kind"] = kind.value
        if fingerprint is not None:
            full_details["fingerprint"] = fingerprint
        super().__init__(
            message=REJECTION_MESSAGES[kind],
            code=REJECTION_CODES[kind],
            origin=ErrorOrigin.THROTTLE,
            details=full_details,
            retryable=True,
            request=request,
        )
        self.kind = kind
        self.fingerprint = fingerprint


class ConfigException(RequestGateException):
    """Raised when runtime configuration is invalid."""

    def __init__(
        self,
        message: str,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_ERROR,
            origin=ErrorOrigin.CONFIG,
            details=full_details,
            retryable=False,
        )
