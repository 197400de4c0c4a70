"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.password_reset import PasswordResetRepository

__all__ = [
    "UserRepository",
    "PasswordResetRepository",
]
