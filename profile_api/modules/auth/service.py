import logging
from supabase import Client
from profile_api.core.errors import AuthError, CollaboratorError, provider_error_message
from profile_api.modules.auth.schemas import (
    AuthRequest, AuthResponse, CurrentUser, RefreshResponse, Session, User
)
from fastapi import status
from typing import Any, Optional

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: Optional[str]) -> str:
    """Token part of an 'Authorization: Bearer <token>' header. The prefix is matched literally."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthError("Missing or invalid authorization header")
    return authorization[len(BEARER_PREFIX):]


def to_user(user: Any) -> Optional[User]:
    if user is None:
        return None
    return User(id=str(user.id), email=getattr(user, "email", None))


def to_session(session: Any) -> Optional[Session]:
    if session is None:
        return None
    return Session(
        access_token=session.access_token,
        refresh_token=session.refresh_token,
        expires_at=getattr(session, "expires_at", None),
    )


class AuthService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def signup(self, auth_data: AuthRequest) -> AuthResponse:
        """Create an account. Session is None when the project requires email confirmation."""
        try:
            auth_response = self.supabase.auth.sign_up({
                "email": auth_data.email,
                "password": auth_data.password,
            })
        except Exception as e:
            message = provider_error_message(e)
            logger.warning("Signup failed: %s", message)
            raise CollaboratorError(message, status.HTTP_400_BAD_REQUEST)

        return AuthResponse(
            message="Account created successfully",
            user=to_user(auth_response.user),
            session=to_session(auth_response.session),
        )

    def login(self, auth_data: AuthRequest) -> AuthResponse:
        try:
            auth_response = self.supabase.auth.sign_in_with_password({
                "email": auth_data.email,
                "password": auth_data.password,
            })
        except Exception as e:
            message = provider_error_message(e)
            logger.warning("Login failed: %s", message)
            raise CollaboratorError(message, status.HTTP_401_UNAUTHORIZED)

        if not auth_response.user or not auth_response.session:
            raise CollaboratorError("Invalid login credentials", status.HTTP_401_UNAUTHORIZED)

        return AuthResponse(
            message="Login successful",
            user=to_user(auth_response.user),
            session=to_session(auth_response.session),
        )

    def refresh(self, refresh_token: str) -> RefreshResponse:
        try:
            auth_response = self.supabase.auth.refresh_session(refresh_token)
        except Exception as e:
            message = provider_error_message(e)
            logger.warning("Session refresh failed: %s", message)
            raise CollaboratorError(message, status.HTTP_401_UNAUTHORIZED)

        if not auth_response.session:
            raise CollaboratorError("Failed to refresh session", status.HTTP_401_UNAUTHORIZED)

        return RefreshResponse(
            message="Session refreshed",
            session=to_session(auth_response.session),
        )

    def logout(self, token: str) -> None:
        """Revoke the session behind the token on the provider side."""
        try:
            self.supabase.auth.admin.sign_out(token)
        except Exception as e:
            message = provider_error_message(e)
            logger.warning("Logout failed: %s", message)
            raise CollaboratorError(message, status.HTTP_400_BAD_REQUEST)

    def get_current_user(self, token: str) -> CurrentUser:
        """Resolve a token to its user. Live provider call every time, nothing is cached."""
        try:
            user_response = self.supabase.auth.get_user(jwt=token)
        except Exception as e:
            logger.warning("Token verification failed: %s", provider_error_message(e))
            raise AuthError("Invalid or expired token")

        user = getattr(user_response, "user", None)
        if not user:
            raise AuthError("Invalid or expired token")

        return CurrentUser(id=str(user.id), email=user.email or "", access_token=token)
