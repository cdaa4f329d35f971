"""
Authentication endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, status

from ..models.base import ResponseModel
from ..models.user import SignInRequest, SignUpRequest, UserAccount
from ..services.auth_service import AuthService
from ..services.profile_service import ProfileService
from .dependencies import get_auth_service, get_bearer_token, get_current_user, get_profile_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def sign_up(
    payload: SignUpRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> ResponseModel:
    account, profile = auth_service.sign_up(payload)
    return ResponseModel.success_response(
        data={"user": account.to_public_dict(), "profile": profile.model_dump(mode="json")},
        message="User created successfully",
    )


@router.post("/signin")
def sign_in(
    payload: SignInRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> ResponseModel:
    session = auth_service.sign_in(payload)
    return ResponseModel.success_response(
        data={"session": session.model_dump(mode="json")},
        message="Signed in successfully",
    )


@router.post("/signout")
def sign_out(
    token: Optional[str] = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> ResponseModel:
    auth_service.sign_out(token)
    return ResponseModel.success_response(message="Signed out successfully")


@router.get("/me")
def me(
    user: UserAccount = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service),
) -> ResponseModel:
    profile = profile_service.find_profile(user.id)
    return ResponseModel.success_response(
        data={
            "user": user.to_public_dict(),
            "profile": profile.model_dump(mode="json") if profile else None,
        },
        message="Current user",
    )
