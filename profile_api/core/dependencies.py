"""
Core dependencies for route protection
"""

from fastapi import Depends, Request, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from profile_api.database.supabase_client import get_supabase, scope_to_user
from profile_api.modules.auth.schemas import CurrentUser
from profile_api.modules.auth.service import AuthService, extract_bearer_token
from supabase import Client
from typing import Optional

# Declares the "Bearer" scheme in the OpenAPI document. auto_error is off so a
# missing header produces our own 401 body instead of FastAPI's 403.
security = HTTPBearer(scheme_name="Bearer", bearerFormat="JWT", auto_error=False)


def get_auth_service(supabase: Client = Depends(get_supabase)) -> AuthService:
    return AuthService(supabase)


def get_bearer_token(
    request: Request,
    _credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
) -> str:
    """
    Extract the token from the raw Authorization header (literal 'Bearer ' prefix).
    _credentials is unused; it only registers the scheme in OpenAPI.
    """
    return extract_bearer_token(request.headers.get("Authorization"))


def get_current_user(
    request: Request,
    token: str = Depends(get_bearer_token),
    auth_service: AuthService = Depends(get_auth_service),
) -> CurrentUser:
    """Verify the bearer token with Supabase and attach the identity to the request"""
    user = auth_service.get_current_user(token)
    request.state.user = user
    return user


def get_user_supabase(
    current_user: CurrentUser = Depends(get_current_user),
    supabase: Client = Depends(get_supabase),
) -> Client:
    """Request's Supabase client with table queries running as the current user"""
    return scope_to_user(supabase, current_user.access_token)
