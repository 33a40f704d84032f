from app.schemas.asset import AssetCreate, AssetUpdate, AssetResponse
from app.schemas.asset_request import AssetRequestCreate, AssetRequestResponse
from app.schemas.user import UserCreate, UserUpdate, UserResponse, RoleResponse
from app.schemas.dashboard import DashboardCount
from app.schemas.payment import (
    CheckoutSessionCreate, CheckoutSessionResponse, PaymentConfirmation, PackageResponse,
)
from app.schemas.common import InsertResult, UserInsertResult, Message, ModifiedResult, DeleteResult

__all__ = [
    "AssetCreate", "AssetUpdate", "AssetResponse",
    "AssetRequestCreate", "AssetRequestResponse",
    "UserCreate", "UserUpdate", "UserResponse", "RoleResponse",
    "DashboardCount",
    "CheckoutSessionCreate", "CheckoutSessionResponse", "PaymentConfirmation", "PackageResponse",
    "InsertResult", "UserInsertResult", "Message", "ModifiedResult", "DeleteResult",
]
