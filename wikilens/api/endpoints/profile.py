"""
Profile routes
"""
from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from typing import Optional

from wikilens.api.dependencies import get_current_user, get_profile_service
from wikilens.models import User
from wikilens.schemas import AccountDelete, MessageResponse, ProfileResponse, ProfileUpdate
from wikilens.services.profile_service import ProfileService


router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("", response_model=ProfileResponse)
async def edit_profile(
    current_user: User = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service)
):
    """
    Get the signed-in user's profile fields

    Requires authentication.
    """
    return ProfileResponse(user=profile_service.edit(current_user))


@router.post("", response_model=ProfileResponse)
async def update_profile(
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    phone_number: Optional[str] = Form(None),
    gender: Optional[str] = Form(None),
    img: Optional[UploadFile] = File(None),
    current_user: User = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service)
):
    """
    Update the signed-in user's profile

    - **img**: optional avatar image, replaces the current one
    - Changing the email resets its verification
    """
    try:
        data = ProfileUpdate(name=name, email=email, phone_number=phone_number, gender=gender)
    except ValidationError as e:
        raise RequestValidationError(
            [{**error, "loc": ("body", *error["loc"])} for error in e.errors(include_url=False)]
        )

    if img is not None and not img.filename:
        img = None

    user = await profile_service.update(current_user, data, img)

    return ProfileResponse(
        status="Profile updated successfully",
        user=profile_service.edit(user)
    )


@router.delete("", response_model=MessageResponse)
async def destroy_profile(
    payload: AccountDelete,
    request: Request,
    current_user: User = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service)
):
    """
    Delete the signed-in user's account

    Requires the current password. Ends the session.
    """
    await profile_service.destroy(current_user, payload.password, request)

    return MessageResponse(status="Account deleted successfully")
