"""Pydantic schemas for request/response validation."""

from app.schemas.token import Token, TokenData
from app.schemas.user import (
    AccountDelete,
    LoginResponse,
    ProfilePictureUpload,
    SessionUser,
    UserCreate,
    UserLogin,
    UserResponse,
    UserUpdate,
)
from app.schemas.password_reset import (
    PasswordResetConfirm,
    PasswordResetRequest,
    PasswordResetVerify,
    SendResetEmailRequest,
)
from app.schemas.nutrition import (
    ActivityLevel,
    CalorieRecommendation,
    CalorieRecommendationRequest,
    Gender,
    WeightGoal,
)

__all__ = [
    "Token",
    "TokenData",
    "AccountDelete",
    "LoginResponse",
    "ProfilePictureUpload",
    "SessionUser",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "UserUpdate",
    "PasswordResetConfirm",
    "PasswordResetRequest",
    "PasswordResetVerify",
    "SendResetEmailRequest",
    "ActivityLevel",
    "CalorieRecommendation",
    "CalorieRecommendationRequest",
    "Gender",
    "WeightGoal",
]
