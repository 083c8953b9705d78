from fastapi import APIRouter, Depends
from profile_api.core.dependencies import get_current_user, get_user_supabase
from profile_api.modules.auth.schemas import CurrentUser, ErrorResponse
from profile_api.modules.profiles.schemas import (
    ProfileResponse, ProfileUpdateRequest, ProfileUpdateResponse
)
from profile_api.modules.profiles.service import ProfileService
from supabase import Client

router = APIRouter(
    prefix="/profile",
    tags=["Profile"],
    responses={
        401: {"model": ErrorResponse, "description": "Authentication error"},
        400: {"model": ErrorResponse, "description": "Error"},
    },
)


def get_profile_service(supabase: Client = Depends(get_user_supabase)) -> ProfileService:
    return ProfileService(supabase)


@router.get("", response_model=ProfileResponse, summary="Get own profile (auth required)")
async def get_profile(
    current_user: CurrentUser = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service)
):
    return ProfileResponse(profile=service.get_profile(current_user.id))


@router.put("", response_model=ProfileUpdateResponse, summary="Update own profile (auth required)")
async def update_profile(
    profile_data: ProfileUpdateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service)
):
    """Update name and/or bio; omitted fields keep their current value"""
    profile = service.update_profile(current_user.id, profile_data)
    return ProfileUpdateResponse(message="Profile updated successfully", profile=profile)
