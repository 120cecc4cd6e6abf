"""
Schemas & Request Descriptor
File: request.py

Purpose: Immutable description of one outgoing HTTP request, as seen by
the request/response hooks.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RequestConfig(BaseModel):
    """
    Effective configuration of a single request.

    Built by the HTTP client before hooks run. Hooks treat it as read-only;
    a hook that needs a different configuration returns a modified copy
    (``model_copy(update=...)``).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    method: str = Field(
        ...,
        description="HTTP method, upper-cased",
    )
    url: str = Field(
        ...,
        description="Target URL as given by the caller (relative to base_url or absolute)",
    )
    # Typed as Any so pydantic keeps the caller's objects as-is
    params: Any = Field(
        default=None,
        description="Query parameters",
    )
    data: Any = Field(
        default=None,
        description="Request body sent as form data / raw bytes",
    )
    json_body: Any = Field(
        default=None,
        description="Request body sent as JSON",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Per-request headers (merged over client defaults)",
    )
    timeout: Optional[float] = Field(
        default=None,
        description="Per-request timeout in seconds",
    )
    throttle: bool = Field(
        default=True,
        description="Set to False to bypass admission control for this request",
    )

    @field_validator("method")
    @classmethod
    def _upper_method(cls, v: str) -> str:
        return v.upper()

    @property
    def body(self) -> Any:
        """The payload that will be sent, JSON body taking precedence."""
        if self.json_body is not None:
            return self.json_body
        return self.data
