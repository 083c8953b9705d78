from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from profile_api.modules.auth.schemas import User


class ProtectedMeResponse(BaseModel):
    message: str
    user: Optional[User] = None
    timestamp: str


class ProtectedData(BaseModel):
    # camelCase on the wire, the frontend reads data.secretMessage
    secret_message: str = Field(alias="secretMessage")
    items: List[str]

    model_config = ConfigDict(populate_by_name=True)


class ProtectedDataResponse(BaseModel):
    message: str
    data: ProtectedData
    timestamp: str
