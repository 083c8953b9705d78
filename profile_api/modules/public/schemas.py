from pydantic import BaseModel


class RootResponse(BaseModel):
    message: str


class HelloResponse(BaseModel):
    message: str
    timestamp: str


class GreetRequest(BaseModel):
    name: str


class GreetResponse(BaseModel):
    message: str
    timestamp: str
