"""Mapping of domain errors onto HTTP responses."""

import logfire
from fastapi import HTTPException, status

from discuss.domain.error import (
    DomainError,
    InvalidStateError,
    NotAuthorizedError,
    NotFoundError,
    UnavailableError,
    ValidationError,
)

# Checked in order, first match wins
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (InvalidStateError, status.HTTP_400_BAD_REQUEST),
    (UnavailableError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]

INTERNAL_ERROR_DETAIL = "Internal server error"


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def to_http_exception(error: DomainError) -> HTTPException:
    """Convert a domain error into an HTTPException.

    Client errors carry the domain message. Server-side failures get a
    generic detail, the real cause only goes to the logs.
    """
    code = status_for(error)
    if code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logfire.error(
            "Request failed", error_type=type(error).__name__, error=str(error)
        )
        return HTTPException(status_code=code, detail=INTERNAL_ERROR_DETAIL)

    logfire.warn("Request rejected", error_type=type(error).__name__, error=str(error))
    if isinstance(error, NotAuthorizedError):
        return HTTPException(
            status_code=code, detail=f"Not authorized to modify this {error.resource}"
        )
    return HTTPException(status_code=code, detail=str(error))


def unexpected_error(operation: str, error: Exception) -> HTTPException:
    """Log an unexpected failure and return a generic 500."""
    logfire.error(
        f"Unexpected error: {operation}",
        error_type=type(error).__name__,
        error=str(error),
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=INTERNAL_ERROR_DETAIL,
    )
