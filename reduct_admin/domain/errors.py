"""Domain-level error types for token administration.

``ReductError`` is the only failure a caller of the token client sees after a
request has been attempted. Each error carries a fixed, human-readable message
per category and, when the server answered, the HTTP status code.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

MALFORMED_RESPONSE_MESSAGE = "The server returned a malformed response."
UNEXPECTED_RESPONSE_MESSAGE = "The server returned an unexpected response. Please try again later."
TRANSPORT_IO_MESSAGE = "An error occurred while processing the request"
TRANSPORT_INTERRUPTED_MESSAGE = "Thread has been interrupted while processing the request"

INVALID_TOKEN_MESSAGE = "The access token is invalid."
MISSING_PERMISSIONS_MESSAGE = "The access token does not have the required permissions."
TOKEN_EXISTS_MESSAGE = "A token already exists with this name."
UNKNOWN_BUCKET_MESSAGE = "One of the bucket names provided does not exist on the server."
TOKEN_NOT_FOUND_MESSAGE = "A token does not exist with this name."
PROVISIONED_TOKEN_MESSAGE = "The token is provisioned and cannot be removed."


class ErrorKind(str, Enum):
    """Closed set of failure categories."""

    INVALID_RESPONSE = "invalid_response"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNPROCESSABLE_ENTITY = "unprocessable_entity"
    UNEXPECTED_STATUS = "unexpected_status"
    TRANSPORT_IO = "transport_io"
    TRANSPORT_INTERRUPTED = "transport_interrupted"


class ReductError(RuntimeError):
    """Classified failure of a token API call."""

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code

    def __repr__(self) -> str:
        return (
            f"ReductError(message={self.message!r}, kind={self.kind.name}, "
            f"status_code={self.status_code!r})"
        )


__all__ = [
    "ErrorKind",
    "INVALID_TOKEN_MESSAGE",
    "MALFORMED_RESPONSE_MESSAGE",
    "MISSING_PERMISSIONS_MESSAGE",
    "PROVISIONED_TOKEN_MESSAGE",
    "ReductError",
    "TOKEN_EXISTS_MESSAGE",
    "TOKEN_NOT_FOUND_MESSAGE",
    "TRANSPORT_INTERRUPTED_MESSAGE",
    "TRANSPORT_IO_MESSAGE",
    "UNEXPECTED_RESPONSE_MESSAGE",
    "UNKNOWN_BUCKET_MESSAGE",
]
