"""
Result-or-error values returned by the auth service.

Service operations never raise :class:`~app.core.errors.AuthError` to
their caller; they return a :class:`ServiceResult` and the caller checks
``error`` before touching ``value``.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from app.core.errors import AuthError, StorageError

T = TypeVar("T")

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    value: Optional[T] = None
    error: Optional[AuthError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: AuthError) -> "ServiceResult[T]":
        return cls(error=error)


def returns_result(method: Callable[..., T]) -> Callable[..., ServiceResult[T]]:
    """
    Wrap a service method so its outcome is returned, not raised.

    ``AuthError`` becomes ``ServiceResult.failure``; a database error rolls
    the session back (through the owning service's ``_rollback``) and
    becomes a ``StorageError``.
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs) -> ServiceResult[T]:
        try:
            return ServiceResult.success(method(self, *args, **kwargs))
        except AuthError as exc:
            return ServiceResult.failure(exc)
        except SQLAlchemyError:
            LOGGER.exception("Database error in %s", method.__name__)
            self._rollback()
            return ServiceResult.failure(StorageError())

    return wrapper
