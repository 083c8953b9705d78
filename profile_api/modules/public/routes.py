from fastapi import APIRouter
from profile_api.core.utils import utc_timestamp
from profile_api.modules.public.schemas import (
    GreetRequest, GreetResponse, HelloResponse, RootResponse
)

router = APIRouter(tags=["Public"])


@router.get("/", response_model=RootResponse, include_in_schema=False)
async def root():
    return RootResponse(message="API server is running!")


@router.get("/api/hello", response_model=HelloResponse, summary="Hello endpoint")
async def hello():
    return HelloResponse(message="Hello from FastAPI!", timestamp=utc_timestamp())


@router.post("/api/greet", response_model=GreetResponse, summary="Greet by name")
async def greet(greet_data: GreetRequest):
    return GreetResponse(message=f"Hello, {greet_data.name}!", timestamp=utc_timestamp())
