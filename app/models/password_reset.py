"""
Password reset code model.

One row per email: issuing a new code overwrites the previous one, so at
most one active code can exist for an address.
"""

from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.core.dates import as_utc, utcnow


class PasswordResetCode(SQLModel, table=True):
    """Short-lived one-time code for the password reset flow."""
    __tablename__ = "password_reset_codes"

    email: str = Field(primary_key=True, max_length=255)
    code: str = Field(nullable=False, max_length=12)
    expires_at: datetime = Field(sa_type=DateTime(timezone=True), nullable=False)
    used: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))

    def is_active(self, now: datetime) -> bool:
        """Unconsumed and not yet expired."""
        return not self.used and as_utc(now) < as_utc(self.expires_at)
