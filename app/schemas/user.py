"""
User API schemas.

Pydantic models for user-related request/response validation.

Email format and password length are checked by the auth service;
these schemas accept any string for them.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# Shared properties
class UserBase(BaseModel):
    """Base user schema with common fields."""
    email: str = Field(..., max_length=255)
    name: Optional[str] = Field(None, max_length=100)


# Request schemas
class UserCreate(UserBase):
    """Schema for user registration."""
    password: str = Field(..., description="Password (min 8 characters)")
    university: Optional[str] = Field(None, max_length=100)
    gender: Optional[str] = Field(None, max_length=20)
    referrer: Optional[str] = Field(None, max_length=255)


class UserLogin(BaseModel):
    """Schema for user login."""
    email: str
    password: str
    remember_me: bool = False


class AccountDelete(BaseModel):
    """Password re-confirmation for account deletion."""
    email: str
    password: str


class UserUpdate(BaseModel):
    """Schema for partial profile updates; unset fields are left untouched."""
    name: Optional[str] = Field(None, max_length=100)
    university: Optional[str] = Field(None, max_length=100)
    gender: Optional[str] = Field(None, max_length=20)
    height: Optional[float] = Field(None, gt=0, le=300)
    weight: Optional[float] = Field(None, gt=0, le=500)
    fitness_goal: Optional[str] = Field(None, max_length=255)
    sns_link: Optional[str] = Field(None, max_length=500)


# Response schemas
class UserResponse(UserBase):
    """Public user data (never includes the password hash)."""
    id: str
    university: Optional[str] = None
    gender: Optional[str] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    fitness_goal: Optional[str] = None
    sns_link: Optional[str] = None
    profile_picture: Optional[str] = None
    referrer: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class SessionUser(BaseModel):
    """Denormalized snapshot of the signed-in user kept in the local session."""
    id: str
    email: str
    name: Optional[str] = None
    profile_picture: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    """Token plus the signed-in user."""
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserResponse


class ProfilePictureResponse(BaseModel):
    url: str


@dataclass(frozen=True)
class ProfilePictureUpload:
    """An uploaded image file, already read into memory."""
    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)
