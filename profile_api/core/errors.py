"""
API error types.

Every error leaves the API as ``{"error": message}``; the status code is
carried by the exception.
"""

from fastapi import status


class ApiError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_response(self) -> dict:
        return {"error": self.message}


class ValidationError(ApiError):
    """Malformed or missing request body / field"""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(ApiError):
    """Missing, malformed, invalid or expired bearer credentials"""
    status_code = status.HTTP_401_UNAUTHORIZED


class CollaboratorError(ApiError):
    """Supabase auth or table store reported a failure; its message is passed through"""
    status_code = status.HTTP_400_BAD_REQUEST


def provider_error_message(exc: Exception) -> str:
    # AuthApiError and postgrest's APIError both expose .message
    message = getattr(exc, "message", None)
    return message if isinstance(message, str) and message else str(exc)
