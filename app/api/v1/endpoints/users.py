"""
User profile endpoints.

Read and partially update the signed-in user's profile, and upload a
profile picture.
"""

from fastapi import APIRouter, Depends, File, UploadFile

from app.api.dependencies import get_auth_service, get_current_user
from app.api.errors import unwrap
from app.core.config import settings
from app.models.user import User
from app.schemas.user import ProfilePictureResponse, ProfilePictureUpload, UserResponse, UserUpdate
from app.services.auth_service import AuthService

router = APIRouter()


@router.get("/me/profile", summary="Get the signed-in user's profile.", response_model=UserResponse, )
def get_profile(user: User = Depends(get_current_user), service: AuthService = Depends(get_auth_service), ):
    return unwrap(service.get_user_profile(user.id))


@router.patch("/me/profile", summary="Update profile fields.", response_model=UserResponse, )
def update_profile(data: UserUpdate, user: User = Depends(get_current_user),
                   service: AuthService = Depends(get_auth_service), ):
    """Only the fields present in the body are changed."""
    return unwrap(service.update_user_profile(user.id, data))


@router.post("/me/profile-picture", summary="Upload a profile picture (image, max 5MB).",
             response_model=ProfilePictureResponse, )
def upload_profile_picture(file: UploadFile = File(...), user: User = Depends(get_current_user),
                           service: AuthService = Depends(get_auth_service), ):
    # One byte past the limit is enough to reject oversize files
    upload = ProfilePictureUpload(filename=file.filename or "", content_type=file.content_type or "",
                                  data=file.file.read(settings.MAX_PROFILE_PICTURE_BYTES + 1))
    return ProfilePictureResponse(url=unwrap(service.upload_profile_picture(user.id, upload)))
