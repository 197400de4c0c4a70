"""
Password reset code repository.

Upsert-by-email storage for one-time reset codes.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Session

from app.core.dates import utcnow
from app.models.password_reset import PasswordResetCode


class PasswordResetRepository:
    """Repository for PasswordResetCode database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get(self, email: str) -> Optional[PasswordResetCode]:
        return self.session.get(PasswordResetCode, email)

    def get_active(self, email: str, now: datetime) -> Optional[PasswordResetCode]:
        """
        Return the unconsumed, unexpired code for an email.

        Args:
            email: Normalized email
            now: Reference time (UTC)

        Returns:
            The active code, or None if never issued, expired, or used
        """
        entry = self.get(email)
        if entry is None or not entry.is_active(now):
            return None
        return entry

    def upsert(self, email: str, code: str, expires_at: datetime) -> PasswordResetCode:
        """Issue a code, replacing whatever was stored for this email."""
        entry = self.get(email)
        if entry is None:
            entry = PasswordResetCode(email=email, code=code, expires_at=expires_at)
        else:
            entry.code = code
            entry.expires_at = expires_at
            entry.used = False
            entry.created_at = utcnow()
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def mark_used(self, entry: PasswordResetCode) -> PasswordResetCode:
        entry.used = True
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry
