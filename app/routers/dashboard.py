from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.dashboard import DashboardCount
import app.services.dashboard_service as svc

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/pie", response_model=list[DashboardCount])
def asset_type_pie(db: Session = Depends(get_db)):
    return svc.asset_type_distribution(db)


@router.get("/bar", response_model=list[DashboardCount])
def top_requested_bar(db: Session = Depends(get_db)):
    return svc.top_requested_assets(db)
