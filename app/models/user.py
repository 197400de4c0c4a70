"""
User database model.

Defines the User table for authentication and profile management.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.core.dates import utcnow


def _new_user_id() -> str:
    return uuid.uuid4().hex


class User(SQLModel, table=True):
    """
    User model for authentication.

    Stores credentials and profile information.  Emails are stored
    lower-cased; the unique index enforces one account per email.
    """
    __tablename__ = "users"

    id: str = Field(default_factory=_new_user_id, primary_key=True, max_length=32)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    password_hash: str = Field(nullable=False)

    # Profile
    name: Optional[str] = Field(default=None, max_length=100)
    university: Optional[str] = Field(default=None, max_length=100)
    gender: Optional[str] = Field(default=None, max_length=20)
    height: Optional[float] = Field(default=None)
    weight: Optional[float] = Field(default=None)
    fitness_goal: Optional[str] = Field(default=None, max_length=255)
    sns_link: Optional[str] = Field(default=None, max_length=500)
    profile_picture: Optional[str] = Field(default=None, max_length=1000)
    referrer: Optional[str] = Field(default=None, max_length=255)

    # Soft delete
    is_deleted: bool = Field(default=False)
    deleted_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utcnow, sa_type=DateTime(timezone=True))
    password_changed_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
