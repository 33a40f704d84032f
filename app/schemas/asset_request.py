from datetime import datetime
from pydantic import BaseModel, Field
from app.models.asset_request import RequestStatus


class AssetRequestCreate(BaseModel):
    asset_id: str = Field(..., alias="assetId")
    quantity: int = Field(..., ge=1)
    reason: str | None = None
    user_name: str | None = Field(None, alias="userName")
    email: str | None = None

    model_config = {"populate_by_name": True, "coerce_numbers_to_str": True}


class AssetRequestResponse(BaseModel):
    id: int = Field(alias="_id")
    asset_id: int = Field(alias="assetId")
    asset_name: str = Field(alias="assetName")
    quantity: int
    reason: str
    status: RequestStatus
    created_at: datetime = Field(alias="createdAt")
    user_name: str = Field(alias="userName")
    email: str

    model_config = {"from_attributes": True, "populate_by_name": True}
