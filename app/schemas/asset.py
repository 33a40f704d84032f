from datetime import datetime
from pydantic import BaseModel, Field


class AssetCreate(BaseModel):
    # name is checked in the service so a missing one gets the catalog's own message
    name: str | None = None
    quantity: int = Field(0, ge=0)
    image: str | None = None
    type: str | None = None


class AssetUpdate(BaseModel):
    name: str | None = None
    quantity: int | None = Field(None, ge=0)
    image: str | None = None
    type: str | None = None


class AssetResponse(BaseModel):
    id: int = Field(alias="_id")
    name: str
    quantity: int
    image: str | None
    type: str | None
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = {"from_attributes": True, "populate_by_name": True}
