from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class ErrorResponse(BaseModel):
    error: str


class AuthRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)


class RefreshRequest(BaseModel):
    refresh_token: str


class User(BaseModel):
    id: str
    email: Optional[str] = None


class Session(BaseModel):
    access_token: str
    refresh_token: str
    expires_at: Optional[int] = None


class AuthResponse(BaseModel):
    message: str
    user: Optional[User] = None
    session: Optional[Session] = None


class RefreshResponse(BaseModel):
    message: str
    session: Session


class MessageResponse(BaseModel):
    message: str


class CurrentUser(BaseModel):
    """Identity resolved from a bearer token for the duration of one request."""
    id: str
    email: str = ""
    access_token: str = Field(exclude=True, repr=False)

    def public(self) -> User:
        return User(id=self.id, email=self.email)
