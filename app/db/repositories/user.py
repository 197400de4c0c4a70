"""
User repository.

Handles database operations for User model.
"""

from typing import Optional

from sqlmodel import Session, select

from app.core.dates import utcnow
from app.models.user import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, user: User) -> User:
        """
        Create a new user in the database.

        Args:
            user: User instance to create

        Returns:
            Created user with generated id
        """
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: str, include_deleted: bool = False) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID
            include_deleted: Also return soft-deleted accounts

        Returns:
            User instance if found, None otherwise
        """
        user = self.session.get(User, user_id)
        if user is None or (user.is_deleted and not include_deleted):
            return None
        return user

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by (already normalized) email address.

        Soft-deleted accounts are returned too; callers decide how to
        treat them.

        Args:
            email: User email

        Returns:
            User instance if found, None otherwise
        """
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def update(self, user: User) -> User:
        """
        Persist changes to an existing user.

        Args:
            user: User instance with updated data

        Returns:
            Updated user
        """
        user.updated_at = utcnow()
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def soft_delete(self, user: User) -> User:
        """Mark the account deleted; the row and its email stay reserved."""
        user.is_deleted = True
        user.deleted_at = utcnow()
        return self.update(user)

    def exists_by_email(self, email: str) -> bool:
        """
        Check if a user with the given email exists.

        Args:
            email: Email to check

        Returns:
            True if user exists, False otherwise
        """
        return self.get_by_email(email) is not None

    def rollback(self) -> None:
        self.session.rollback()
