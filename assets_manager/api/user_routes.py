"""
Profile and account endpoints.
"""

from fastapi import APIRouter, Depends

from ..models.base import ResponseModel
from ..models.user import ProfileUpdate, UserAccount
from ..services.profile_service import ProfileService
from .dependencies import get_current_user, get_profile_service

router = APIRouter(prefix="/user", tags=["user"])


@router.get("/profile")
def get_profile(
    user: UserAccount = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service),
) -> ResponseModel:
    return ResponseModel.success_response(
        data=service.get_profile(user.id).model_dump(mode="json"),
        message="Profile",
    )


@router.put("/profile")
def update_profile(
    payload: ProfileUpdate,
    user: UserAccount = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service),
) -> ResponseModel:
    profile = service.update_profile(user.id, payload)
    return ResponseModel.success_response(
        data=profile.model_dump(mode="json"),
        message="Profile updated successfully",
    )


@router.delete("/delete-account")
def delete_account(
    user: UserAccount = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service),
) -> ResponseModel:
    service.delete_account(user.id)
    return ResponseModel.success_response(message="Account deleted successfully")
