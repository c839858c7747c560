"""
Failure classification for marketplace API calls.

Every error that reaches a synchronizer has already been normalized by the
API client into a single shape:

- NetworkError: no response reached us (connection refused, timeout, DNS)
- ApiError: the server answered with a non-success status or a body we
  could not interpret

Synchronizers decide per operation whether a failure is recovered locally,
reported through a MutationResult, or re-raised.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

NETWORK_ERROR_MESSAGE = "Network error. Please check your connection."


class FailureKind(str, Enum):
    """Classification of request failures."""

    NETWORK_ERROR = "network_error"
    API_ERROR = "api_error"


class ApiError(Exception):
    """
    Normalized request failure.

    Attributes:
        kind: Whether the failure happened before or after a response arrived
        message: Human-readable explanation (server message when available)
        status: HTTP status code, 0 for network errors
        details: Optional structured payload sent by the server
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        status: int = 0,
        details: Any = None,
    ):
        self.kind = kind
        self.message = message
        self.status = status
        self.details = details
        super().__init__(message)

    @classmethod
    def network(cls, message: str | None = None) -> "ApiError":
        """Create a failure for a request that never got a response."""
        return cls(FailureKind.NETWORK_ERROR, message or NETWORK_ERROR_MESSAGE)

    @classmethod
    def from_status(cls, status: int, payload: Any = None) -> "ApiError":
        """
        Create a failure for a non-success response.

        Uses the server's ``message`` and ``details`` fields when the body
        is a JSON object carrying them.
        """
        message = None
        details = None
        if isinstance(payload, dict):
            message = payload.get("message")
            details = payload.get("details")
        return cls(
            FailureKind.API_ERROR,
            message or f"HTTP error! status: {status}",
            status=status,
            details=details,
        )

    @property
    def is_network_error(self) -> bool:
        return self.kind == FailureKind.NETWORK_ERROR

    def __repr__(self) -> str:
        return f"ApiError(kind={self.kind.value!r}, status={self.status}, message={self.message!r})"


class MutationResult(BaseModel):
    """Outcome of a collection mutation, returned to the caller."""

    success: bool = Field(
        ...,
        description="True if the server accepted the mutation",
    )
    error: str | None = Field(
        default=None,
        description="Failure message (present when success is False)",
    )

    @classmethod
    def ok(cls) -> "MutationResult":
        """Create a success result."""
        return cls(success=True)

    @classmethod
    def failed(cls, error: ApiError | str) -> "MutationResult":
        """Create a failure result from an error or message."""
        message = error.message if isinstance(error, ApiError) else error
        return cls(success=False, error=message)
