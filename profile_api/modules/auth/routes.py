from fastapi import APIRouter, Depends
from profile_api.modules.auth.schemas import (
    AuthRequest, AuthResponse, CurrentUser, ErrorResponse, MessageResponse,
    RefreshRequest, RefreshResponse
)
from profile_api.modules.auth.service import AuthService
from profile_api.core.dependencies import get_auth_service, get_current_user

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post(
    "/signup",
    response_model=AuthResponse,
    summary="Create an account",
    responses={400: {"model": ErrorResponse, "description": "Error"}},
)
async def signup(
    auth_data: AuthRequest,
    service: AuthService = Depends(get_auth_service)
):
    return service.signup(auth_data)


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Log in",
    responses={401: {"model": ErrorResponse, "description": "Authentication error"}},
)
async def login(
    auth_data: AuthRequest,
    service: AuthService = Depends(get_auth_service)
):
    return service.login(auth_data)


@router.post(
    "/refresh",
    response_model=RefreshResponse,
    summary="Exchange a refresh token for a new session",
    responses={401: {"model": ErrorResponse, "description": "Authentication error"}},
)
async def refresh(
    refresh_data: RefreshRequest,
    service: AuthService = Depends(get_auth_service)
):
    return service.refresh(refresh_data.refresh_token)


@router.post(
    "/logout",
    response_model=MessageResponse,
    summary="Log out (requires a valid session)",
    responses={
        401: {"model": ErrorResponse, "description": "Authentication error"},
        400: {"model": ErrorResponse, "description": "Error"},
    },
)
async def logout(
    current_user: CurrentUser = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service)
):
    """Logout and revoke the session's refresh tokens"""
    service.logout(current_user.access_token)
    return MessageResponse(message="Logged out successfully")
