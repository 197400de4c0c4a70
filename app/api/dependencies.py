"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication and service access.
"""

from fastapi import Depends, HTTPException, status
from sqlmodel import Session

from app.core.dates import as_utc
from app.core.security import decode_access_token, oauth2_scheme
from app.db.repositories.user import UserRepository
from app.db.session import get_db
from app.models.user import User
from app.schemas.token import TokenData
from app.services.auth_service import AuthService
from app.services.mailer import EmailSender, get_email_sender
from app.services.storage import BlobStore, get_blob_store


def get_mailer() -> EmailSender:
    return get_email_sender()


def get_storage() -> BlobStore:
    return get_blob_store()


def get_auth_service(db: Session = Depends(get_db), mailer: EmailSender = Depends(get_mailer),
                     blob_store: BlobStore = Depends(get_storage), ) -> AuthService:
    """Per-request service; HTTP clients hold their session as a bearer token."""
    return AuthService(db, mailer=mailer, blob_store=blob_store)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail,
                         headers={ "WWW-Authenticate": "Bearer" }, )


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db), ) -> User:
    """Extract and validate the current user from the JWT token."""
    payload = decode_access_token(token)
    if not payload:
        raise _unauthorized("Invalid or expired token")
    token_data = TokenData(user_id=payload["sub"], issued_at=payload.get("iat"))

    user = UserRepository(db).get_by_id(token_data.user_id)
    if not user:
        raise _unauthorized("User not found")

    # Tokens issued before the last password reset are revoked
    if user.password_changed_at is not None:
        changed_at = int(as_utc(user.password_changed_at).timestamp())
        if (token_data.issued_at or 0) < changed_at:
            raise _unauthorized("Token revoked by password change")
    return user
