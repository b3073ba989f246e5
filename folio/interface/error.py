"""Translation of domain errors into HTTP errors."""

import logfire
from fastapi import HTTPException, status

from folio.domain.error import (
    DomainError,
    EngagementError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error onto the HTTP error a client should see.

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, NotAuthenticatedError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error)
        )
    if isinstance(error, NotAuthorizedError):
        logfire.warn("Unauthorized access attempt", error=str(error))
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(error, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{error.resource} not found",
        )
    if isinstance(error, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, EngagementError):
        # Transient; clients roll back optimistic state and may retry
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(error)
        )

    logfire.warn("Unhandled domain error", error=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
