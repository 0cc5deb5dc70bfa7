"""Interface layer error translation.

Maps domain errors onto HTTP errors: a missing comment is a client error,
any store failure is a server error.
"""

import logfire
from fastapi import HTTPException, status

from remark.domain.error import NotFoundError, StoreError


def not_found(error: NotFoundError) -> HTTPException:
    """Translate a missing comment into a 404."""
    logfire.warn(
        "Comment lookup failed",
        resource=error.resource,
        identifier=error.identifier,
    )
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))


def store_failure(error: StoreError, operation: str) -> HTTPException:
    """Translate a store failure into a 500 without leaking its details."""
    logfire.error(
        "Comment store failure",
        operation=operation,
        error=str(error),
        error_type=type(error).__name__,
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {operation}",
    )
