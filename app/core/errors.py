"""
Domain errors for account and authentication operations.

Every error carries a stable machine-readable ``code`` and a localized,
user-facing ``message``.  Services raise these internally and hand them
back inside a :class:`~app.services.result.ServiceResult`; the HTTP layer
maps them onto status codes.
"""

from typing import Optional


class AuthError(Exception):
    """Base class for all account / auth failures."""

    code: str = "auth_error"
    default_message: str = "요청을 처리하는 중 오류가 발생했습니다."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class ValidationError(AuthError):
    """Malformed input: bad email, bad file type or size, oversize password."""

    code = "validation_error"
    default_message = "입력값이 올바르지 않습니다."


class DuplicateError(AuthError):
    """Email already registered."""

    code = "duplicate"
    default_message = "이미 가입된 이메일입니다."


class NotFoundError(AuthError):
    """No such user, or no such reset in progress."""

    code = "not_found"
    default_message = "등록되지 않은 이메일입니다."


class InvalidCredentialsError(AuthError):
    """Wrong password."""

    code = "invalid_credentials"
    default_message = "비밀번호가 올바르지 않습니다."


class ExpiredError(AuthError):
    """Reset code expired, consumed, or never issued."""

    code = "expired"
    default_message = "인증 코드가 만료되었습니다. 다시 요청해주세요."


class MismatchError(AuthError):
    """Reset code does not match the issued one."""

    code = "mismatch"
    default_message = "인증 코드가 올바르지 않습니다."


class WeakPasswordError(AuthError):
    """Password shorter than the minimum length."""

    code = "weak_password"
    default_message = "비밀번호는 최소 8자 이상이어야 합니다."


class StorageError(AuthError):
    """Persistence layer (database or blob store) failure."""

    code = "storage_error"
    default_message = "저장 중 오류가 발생했습니다."


class DeliveryError(AuthError):
    """Email delivery failure."""

    code = "delivery_error"
    default_message = "인증 코드 발송에 실패했습니다."
