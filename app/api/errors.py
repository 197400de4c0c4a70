"""
Mapping from domain errors to HTTP responses.
"""

from typing import TypeVar

from fastapi import HTTPException, status

from app.core.errors import (
    AuthError,
    DeliveryError,
    DuplicateError,
    ExpiredError,
    InvalidCredentialsError,
    MismatchError,
    NotFoundError,
    StorageError,
    ValidationError,
    WeakPasswordError,
)
from app.services.result import ServiceResult

T = TypeVar("T")

ERROR_STATUS: dict[type[AuthError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    WeakPasswordError: status.HTTP_400_BAD_REQUEST,
    MismatchError: status.HTTP_400_BAD_REQUEST,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateError: status.HTTP_409_CONFLICT,
    ExpiredError: status.HTTP_410_GONE,
    StorageError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    DeliveryError: status.HTTP_502_BAD_GATEWAY,
}


class AuthHTTPException(HTTPException):
    """HTTPException carrying the domain error code alongside the message."""

    def __init__(self, error: AuthError):
        super().__init__(status_code=ERROR_STATUS.get(type(error), status.HTTP_400_BAD_REQUEST), detail=error.message)
        self.code = error.code


def unwrap(result: ServiceResult[T]) -> T:
    """Return the value of a successful result, raise the mapped HTTP error otherwise."""
    if result.error is not None:
        raise AuthHTTPException(result.error)
    return result.value
