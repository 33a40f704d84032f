from datetime import datetime
from pydantic import BaseModel, Field


class CheckoutSessionCreate(BaseModel):
    hr_id: str = Field(..., alias="hrId")
    package_type: str = Field(..., alias="packageType")
    amount: float

    model_config = {"populate_by_name": True, "coerce_numbers_to_str": True}


class CheckoutSessionResponse(BaseModel):
    url: str


class PaymentConfirmation(BaseModel):
    success: bool
    package_type: str | None = Field(None, alias="packageType")
    package_limit: int | None = Field(None, alias="packageLimit")

    model_config = {"populate_by_name": True}


class PackageResponse(BaseModel):
    hr_id: str = Field(alias="hrId")
    package_type: str = Field(alias="packageType")
    package_limit: int = Field(alias="packageLimit")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = {"from_attributes": True, "populate_by_name": True}
