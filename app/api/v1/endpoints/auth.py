"""
Authentication endpoints.

Handles registration, login, password reset and account deletion.
"""
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from app.api.dependencies import get_auth_service, get_current_user
from app.api.errors import unwrap
from app.core.config import settings
from app.core.security import create_access_token
from app.core.validators import normalize_email
from app.models.user import User
from app.schemas.password_reset import (
    MessageResponse,
    PasswordResetConfirm,
    PasswordResetRequest,
    PasswordResetVerify,
    VerifyResponse,
)
from app.schemas.token import Token
from app.schemas.user import AccountDelete, LoginResponse, UserCreate, UserLogin, UserResponse
from app.services.auth_service import AuthService

router = APIRouter()


def _issue_token(user: UserResponse, remember_me: bool) -> tuple[str, int]:
    """Remember-me tokens outlive the default access token."""
    if remember_me:
        lifetime = timedelta(days=settings.REMEMBER_ME_EXPIRE_DAYS)
    else:
        lifetime = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    token = create_access_token(data={ "sub": user.id }, expires_delta=lifetime)
    return token, int(lifetime.total_seconds())


@router.post("/register",
             summary="User registration endpoint.",
             response_model=UserResponse,
             status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, service: AuthService = Depends(get_auth_service)):
    """
    Register a new user.

    Args:
        user_data: Registration data (email, password, name, optional profile)
        service: Auth service

    Returns:
        Created user data (without password)

    Raises:
        HTTPException 400: Invalid email or weak password
        HTTPException 409: Email already registered
    """
    return unwrap(service.sign_up(user_data))


@router.post("/login",
             summary="User login endpoint via OAuth2 form (for Swagger UI).",
             response_model=Token)
def login(form_data: OAuth2PasswordRequestForm = Depends(), service: AuthService = Depends(get_auth_service)):
    """
    Authenticate user via OAuth2 form (for Swagger UI).

    Use email as username.
    """
    user = unwrap(service.sign_in(form_data.username, form_data.password))
    token, _ = _issue_token(user, remember_me=False)
    return Token(access_token=token, token_type="bearer")


@router.post("/token",
             summary="User login endpoint via Json.",
             response_model=LoginResponse)
def login_json(login_data: UserLogin, service: AuthService = Depends(get_auth_service)):
    """
    Authenticate user via JSON body.

    Args:
        login_data: User login credentials (email, password, remember_me)
        service: Auth service

    Returns:
        JWT access token and the signed-in user
    """
    user = unwrap(service.sign_in(login_data.email, login_data.password, login_data.remember_me))
    token, expires_in = _issue_token(user, login_data.remember_me)
    return LoginResponse(access_token=token, expires_in=expires_in, user=user)


@router.post("/logout",
             summary="Logout (client discards its token).",
             status_code=status.HTTP_204_NO_CONTENT)
def logout():
    # Bearer tokens are stateless; nothing to revoke server-side
    return None


@router.get("/me",
            summary="User info endpoint.",
            response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    return user


@router.post("/password-reset/request",
             summary="Email a password reset code.",
             response_model=MessageResponse)
def request_password_reset(data: PasswordResetRequest, service: AuthService = Depends(get_auth_service)):
    unwrap(service.request_password_reset(data.email))
    return MessageResponse(message="인증 코드가 발송되었습니다.")


@router.post("/password-reset/verify",
             summary="Check a password reset code.",
             response_model=VerifyResponse)
def verify_reset_code(data: PasswordResetVerify, service: AuthService = Depends(get_auth_service)):
    return VerifyResponse(valid=unwrap(service.verify_reset_code(data.email, data.code)))


@router.post("/password-reset/confirm",
             summary="Set a new password with a reset code.",
             response_model=MessageResponse)
def reset_password(data: PasswordResetConfirm, service: AuthService = Depends(get_auth_service)):
    unwrap(service.reset_password(data.email, data.code, data.new_password))
    return MessageResponse(message="비밀번호가 변경되었습니다.")


@router.post("/delete-account",
             summary="Delete the account after re-entering the password.",
             response_model=MessageResponse)
def delete_account(data: AccountDelete, user: User = Depends(get_current_user),
                   service: AuthService = Depends(get_auth_service)):
    """Only the signed-in user can delete their own account."""
    if normalize_email(data.email) != user.email:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="본인 계정만 탈퇴할 수 있습니다.")
    unwrap(service.delete_account(data.email, data.password))
    return MessageResponse(message="회원 탈퇴가 완료되었습니다.")
