from fastapi import APIRouter, Depends
from profile_api.core.dependencies import get_current_user
from profile_api.core.utils import utc_timestamp
from profile_api.modules.auth.schemas import CurrentUser, ErrorResponse
from profile_api.modules.protected.schemas import (
    ProtectedData, ProtectedDataResponse, ProtectedMeResponse
)

router = APIRouter(
    prefix="/protected",
    tags=["Protected"],
    responses={401: {"model": ErrorResponse, "description": "Authentication error"}},
)

DEMO_ITEMS = ["item1", "item2", "item3"]


@router.get("/me", response_model=ProtectedMeResponse, summary="Current user (auth required)")
async def me(current_user: CurrentUser = Depends(get_current_user)):
    return ProtectedMeResponse(
        message="You are authenticated!",
        user=current_user.public(),
        timestamp=utc_timestamp(),
    )


@router.get("/data", response_model=ProtectedDataResponse, summary="Protected data (auth required)")
async def protected_data(current_user: CurrentUser = Depends(get_current_user)):
    return ProtectedDataResponse(
        message="This is protected data",
        data=ProtectedData(
            secret_message=f"Hello {current_user.email}, this is your secret data!",
            items=list(DEMO_ITEMS),
        ),
        timestamp=utc_timestamp(),
    )
