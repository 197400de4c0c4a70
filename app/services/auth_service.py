"""
Auth service.

Business logic for accounts: sign-up, sign-in, the local session,
profile management, the three-step password reset, and account deletion.

Every public operation returns a :class:`~app.services.result.ServiceResult`;
errors from :mod:`app.core.errors` never propagate to the caller.
Users are handed out as :class:`~app.schemas.user.UserResponse`; the
password hash never leaves this module.

Password reset flow (per email)::

    Idle --request--> CodeRequested --verify--> CodeVerified --reset--> Idle

Requesting again overwrites the stored code, so the last request wins.
Verifying does not consume the code; only a completed reset does.
"""

import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.config import settings
from app.core.dates import utcnow
from app.core.errors import (
    DuplicateError,
    ExpiredError,
    InvalidCredentialsError,
    MismatchError,
    NotFoundError,
    ValidationError,
    WeakPasswordError,
)
from app.core.security import BCRYPT_MAX_BYTES, get_password_hash, verify_password
from app.core.validators import is_valid_email, normalize_email
from app.db.repositories.password_reset import PasswordResetRepository
from app.db.repositories.user import UserRepository
from app.models.password_reset import PasswordResetCode
from app.models.user import User
from app.schemas.user import ProfilePictureUpload, SessionUser, UserCreate, UserResponse, UserUpdate
from app.services.mailer import EmailSender, build_reset_email, get_email_sender
from app.services.result import returns_result
from app.services.session_context import SessionContext
from app.services.storage import BlobStore, get_blob_store

LOGGER = logging.getLogger(__name__)

INVALID_EMAIL_MESSAGE = "올바른 이메일 형식이 아닙니다."
DELETED_ACCOUNT_MESSAGE = "탈퇴한 계정입니다."


def generate_reset_code(length: int = settings.RESET_CODE_LENGTH) -> str:
    """Uniformly random, zero-padded numeric code."""
    return f"{secrets.randbelow(10 ** length):0{length}d}"


class AuthService:
    """Service for account and authentication business logic."""

    def __init__(
        self,
        session: Session,
        *,
        mailer: Optional[EmailSender] = None,
        blob_store: Optional[BlobStore] = None,
        session_context: Optional[SessionContext] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        """
        Initialize service with its collaborators.

        Args:
            session: SQLModel database session
            mailer: Outbound email sender (defaults from settings)
            blob_store: Profile picture storage (defaults from settings)
            session_context: Local session holder; sign-in / sign-out touch it when given
            clock: Returns the current time (timezone-aware UTC)
        """
        self.repository = UserRepository(session)
        self.reset_codes = PasswordResetRepository(session)
        self.mailer = mailer or get_email_sender()
        self.blob_store = blob_store or get_blob_store()
        self.session_context = session_context
        self.clock = clock

    def _rollback(self) -> None:
        self.repository.rollback()

    # ------------------------------------------------------------------
    # Validation helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _require_valid_email(email: str) -> str:
        normalized = normalize_email(email)
        if not is_valid_email(normalized):
            raise ValidationError(INVALID_EMAIL_MESSAGE)
        return normalized

    @staticmethod
    def _require_strong_password(password: str) -> None:
        if len(password or "") < settings.MIN_PASSWORD_LENGTH:
            raise WeakPasswordError(f"비밀번호는 최소 {settings.MIN_PASSWORD_LENGTH}자 이상이어야 합니다.")
        if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValidationError("비밀번호가 너무 깁니다.")

    def _get_active_user(self, user_id: str) -> User:
        user = self.repository.get_by_id(user_id)
        if not user:
            raise NotFoundError("사용자를 찾을 수 없습니다.")
        return user

    def _authenticate(self, email: str, password: str) -> User:
        """Shared credential check for sign-in and account deletion."""
        user = self.repository.get_by_email(normalize_email(email))
        if not user:
            raise NotFoundError()
        if user.is_deleted:
            raise NotFoundError(DELETED_ACCOUNT_MESSAGE)
        if not verify_password(password, user.password_hash):
            raise InvalidCredentialsError()
        return user

    def _refresh_session(self, user: User) -> None:
        """Keep the local snapshot in step with a profile change."""
        if self.session_context is None:
            return
        current = self.session_context.get_session()
        if current is not None and current.id == user.id:
            self.session_context.refresh_session(SessionUser.model_validate(user))

    def _require_active_code(self, email: str, code: str) -> PasswordResetCode:
        entry = self.reset_codes.get_active(normalize_email(email), self.clock())
        if entry is None:
            raise ExpiredError()
        if entry.code != (code or "").strip():
            raise MismatchError()
        return entry

    # ------------------------------------------------------------------
    # Sign-up / sign-in / session
    # ------------------------------------------------------------------

    @returns_result
    def sign_up(self, user_data: UserCreate) -> UserResponse:
        """
        Register a new user.

        Args:
            user_data: User registration data

        Returns:
            Created user (public fields only)

        Errors:
            ValidationError, WeakPasswordError, DuplicateError, StorageError
        """
        email = self._require_valid_email(user_data.email)
        self._require_strong_password(user_data.password)

        # Check if user already exists
        if self.repository.exists_by_email(email):
            raise DuplicateError()

        user = User(
            email=email,
            password_hash=get_password_hash(user_data.password),
            name=user_data.name,
            university=user_data.university or None,
            gender=user_data.gender or None,
            referrer=user_data.referrer or None,
        )
        try:
            user = self.repository.create(user)
        except IntegrityError:
            # Lost a concurrent sign-up race on the unique email index
            self._rollback()
            raise DuplicateError()

        LOGGER.info("User registered: %s", user.id)
        return UserResponse.model_validate(user)

    @returns_result
    def sign_in(self, email: str, password: str, remember_me: bool = False) -> UserResponse:
        """
        Authenticate a user and establish the local session.

        Args:
            email: Login email (any case)
            password: Plain password
            remember_me: Keep the session across restarts

        Returns:
            The authenticated user (public fields only)

        Errors:
            NotFoundError, InvalidCredentialsError
        """
        try:
            user = self._authenticate(email, password)
        except InvalidCredentialsError:
            LOGGER.info("Failed sign-in for %s", normalize_email(email))
            raise

        if self.session_context is not None:
            self.session_context.set_session(SessionUser.model_validate(user), remember=remember_me)

        LOGGER.info("User signed in: %s", user.id)
        return UserResponse.model_validate(user)

    def sign_out(self) -> None:
        """Clear the local session.  No-op without one."""
        if self.session_context is not None:
            self.session_context.clear_session()

    def get_current_user(self) -> Optional[SessionUser]:
        """Snapshot of the signed-in user, or None."""
        if self.session_context is None:
            return None
        return self.session_context.get_session()

    def is_logged_in(self) -> bool:
        return self.get_current_user() is not None

    # ------------------------------------------------------------------
    # Profile
    # ------------------------------------------------------------------

    @returns_result
    def get_user_profile(self, user_id: str) -> UserResponse:
        return UserResponse.model_validate(self._get_active_user(user_id))

    @returns_result
    def update_user_profile(self, user_id: str, data: UserUpdate) -> UserResponse:
        """
        Apply a partial profile update.

        Only fields explicitly set in ``data`` are written.

        Errors:
            NotFoundError, StorageError
        """
        user = self._get_active_user(user_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(user, key, value)
        user = self.repository.update(user)
        self._refresh_session(user)
        return UserResponse.model_validate(user)

    @returns_result
    def upload_profile_picture(self, user_id: str, upload: ProfilePictureUpload) -> str:
        """
        Store a new profile picture and point the user at it.

        Returns:
            Public URL of the stored image

        Errors:
            ValidationError (not an image, empty, or over the size limit),
            NotFoundError, StorageError
        """
        if not (upload.content_type or "").startswith("image/"):
            raise ValidationError("이미지 파일만 업로드할 수 있습니다.")
        if upload.size == 0:
            raise ValidationError("빈 파일은 업로드할 수 없습니다.")
        if upload.size > settings.MAX_PROFILE_PICTURE_BYTES:
            limit_mb = settings.MAX_PROFILE_PICTURE_BYTES // (1024 * 1024)
            raise ValidationError(f"파일 크기는 {limit_mb}MB 이하여야 합니다.")

        user = self._get_active_user(user_id)
        url = self.blob_store.upload(user.id, upload)

        user.profile_picture = url
        user = self.repository.update(user)
        self._refresh_session(user)
        return url

    # ------------------------------------------------------------------
    # Password reset
    # ------------------------------------------------------------------

    @returns_result
    def request_password_reset(self, email: str) -> bool:
        """
        Issue a reset code and email it.

        Replaces any earlier code for the same email.

        Errors:
            ValidationError, NotFoundError, DeliveryError, StorageError
        """
        email = self._require_valid_email(email)

        user = self.repository.get_by_email(email)
        if not user or user.is_deleted:
            if settings.RESET_HIDE_UNKNOWN_EMAIL:
                LOGGER.info("Reset requested for unknown email %s", email)
                return True
            raise NotFoundError()

        code = generate_reset_code()
        expires_at = self.clock() + timedelta(minutes=settings.RESET_CODE_TTL_MINUTES)
        self.reset_codes.upsert(email, code, expires_at)

        subject, html_body = build_reset_email(code)
        message_id = self.mailer.send(email, subject, html_body)
        LOGGER.info("Reset code sent to %s (message %s)", email, message_id)
        return True

    @returns_result
    def verify_reset_code(self, email: str, code: str) -> bool:
        """
        Check a reset code without consuming it.

        Errors:
            ExpiredError (none active), MismatchError
        """
        self._require_active_code(email, code)
        return True

    @returns_result
    def reset_password(self, email: str, code: str, new_password: str) -> bool:
        """
        Set a new password with a valid reset code, then consume the code.

        Errors:
            ExpiredError, MismatchError, WeakPasswordError, ValidationError,
            NotFoundError, StorageError
        """
        entry = self._require_active_code(email, code)
        self._require_strong_password(new_password)

        user = self.repository.get_by_email(entry.email)
        if not user or user.is_deleted:
            raise NotFoundError()

        user.password_hash = get_password_hash(new_password)
        user.password_changed_at = self.clock()
        self.repository.update(user)
        self.reset_codes.mark_used(entry)

        LOGGER.info("Password reset completed for %s", user.id)
        return True

    # ------------------------------------------------------------------
    # Deletion
    # ------------------------------------------------------------------

    @returns_result
    def delete_account(self, email: str, password: str) -> bool:
        """
        Soft-delete an account after re-checking its password.

        The local session is cleared as well when this service holds one.

        Errors:
            NotFoundError, InvalidCredentialsError, StorageError
        """
        user = self._authenticate(email, password)
        self.repository.soft_delete(user)
        self.sign_out()

        LOGGER.info("Account deleted: %s", user.id)
        return True
