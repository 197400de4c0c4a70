"""
Password reset schemas.

Request bodies for the three-step reset flow and for the stateless
reset-email endpoint.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PasswordResetRequest(BaseModel):
    """Step 1: ask for a code to be emailed."""
    email: str


class PasswordResetVerify(BaseModel):
    """Step 2: check the emailed code."""
    email: str
    code: str = Field(..., max_length=12)


class PasswordResetConfirm(BaseModel):
    """Step 3: set the new password."""
    email: str
    code: str = Field(..., max_length=12)
    new_password: str


class SendResetEmailRequest(BaseModel):
    """Body of the reset-email endpoint.  Both fields are checked by hand so
    a missing one answers 400 rather than 422."""
    email: Optional[str] = None
    code: Optional[str] = None


class MessageResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None


class VerifyResponse(BaseModel):
    valid: bool
