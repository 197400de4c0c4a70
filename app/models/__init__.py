"""SQLModel database models."""

from app.models.user import User
from app.models.password_reset import PasswordResetCode

__all__ = [
    "User",
    "PasswordResetCode",
]
