from app.models.asset import Asset
from app.models.asset_request import AssetRequest, RequestStatus
from app.models.user import User
from app.models.package import Package

__all__ = ["Asset", "AssetRequest", "RequestStatus", "User", "Package"]
