from pydantic import BaseModel
from typing import Optional


class Profile(BaseModel):
    id: str
    name: Optional[str] = None
    bio: Optional[str] = None
    # passed through as Supabase returns them (ISO 8601 strings)
    created_at: str
    updated_at: str


class ProfileResponse(BaseModel):
    profile: Profile


class ProfileUpdateRequest(BaseModel):
    # may be omitted, but an explicit null is rejected (defaults are not validated)
    name: str = None
    bio: str = None


class ProfileUpdateResponse(BaseModel):
    message: str
    profile: Profile
