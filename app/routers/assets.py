from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.asset import AssetCreate, AssetUpdate, AssetResponse
from app.schemas.common import InsertResult, ModifiedResult, DeleteResult
import app.services.asset_service as svc

router = APIRouter(prefix="/assets", tags=["assets"])


@router.get("", response_model=list[AssetResponse])
def list_assets(db: Session = Depends(get_db)):
    return svc.get_assets(db)


@router.get("/{asset_id}", response_model=AssetResponse)
def get_asset(asset_id: str, db: Session = Depends(get_db)):
    return svc.get_asset(db, asset_id)


@router.post("", response_model=InsertResult, status_code=201)
def create_asset(data: AssetCreate, db: Session = Depends(get_db)):
    asset = svc.create_asset(db, data)
    return InsertResult(inserted_id=asset.id)


@router.put("/{asset_id}", response_model=ModifiedResult)
def update_asset(asset_id: str, data: AssetUpdate, db: Session = Depends(get_db)):
    return ModifiedResult(modified_count=svc.update_asset(db, asset_id, data))


@router.delete("/{asset_id}", response_model=DeleteResult)
def delete_asset(asset_id: str, db: Session = Depends(get_db)):
    return DeleteResult(message="Asset deleted", deleted_count=svc.delete_asset(db, asset_id))
