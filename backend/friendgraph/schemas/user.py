"""User Schemas — explicit user registration."""

from pydantic import BaseModel

from friendgraph.schemas.common import EmailField


class UserCreate(BaseModel):
    email: EmailField


class UserData(BaseModel):
    id: int
    email: str
