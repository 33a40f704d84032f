from datetime import datetime
from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    name: str | None = None
    email: str | None = None
    role: str | None = None
    status: str | None = None
    team: str | None = None
    photo_url: str | None = Field(None, alias="photoURL")

    model_config = {"populate_by_name": True}


class UserUpdate(BaseModel):
    name: str | None = None
    email: str | None = None
    role: str | None = None
    status: str | None = None
    team: str | None = None
    photo_url: str | None = Field(None, alias="photoURL")

    model_config = {"populate_by_name": True}


class UserResponse(BaseModel):
    id: int = Field(alias="_id")
    name: str
    email: str
    role: str | None
    status: str | None
    team: str | None
    photo_url: str | None = Field(alias="photoURL")
    created_at: datetime = Field(alias="createdAt")

    model_config = {"from_attributes": True, "populate_by_name": True}


class RoleResponse(BaseModel):
    role: str
