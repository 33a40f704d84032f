from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.asset_request import AssetRequestCreate, AssetRequestResponse
from app.schemas.common import InsertResult, Message, DeleteResult
import app.services.request_service as svc

router = APIRouter(prefix="/asset_requests", tags=["asset requests"])


@router.get("", response_model=list[AssetRequestResponse])
def list_requests(db: Session = Depends(get_db)):
    return svc.get_requests(db)


@router.post("", response_model=InsertResult, status_code=201)
def create_request(data: AssetRequestCreate, db: Session = Depends(get_db)):
    req = svc.create_request(db, data)
    return InsertResult(inserted_id=req.id)


@router.put("/{request_id}/approve", response_model=Message)
def approve_request(request_id: str, db: Session = Depends(get_db)):
    svc.approve_request(db, request_id)
    return Message(message="Request approved")


@router.put("/{request_id}/reject", response_model=Message)
def reject_request(request_id: str, db: Session = Depends(get_db)):
    svc.reject_request(db, request_id)
    return Message(message="Request rejected")


@router.delete("/{request_id}", response_model=DeleteResult)
def delete_request(request_id: str, db: Session = Depends(get_db)):
    return DeleteResult(message="Request deleted", deleted_count=svc.delete_request(db, request_id))
