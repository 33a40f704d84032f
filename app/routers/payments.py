from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.payment import (
    CheckoutSessionCreate, CheckoutSessionResponse, PaymentConfirmation, PackageResponse,
)
from app.services.payment_gateway import get_payment_gateway
import app.services.payment_service as svc

router = APIRouter(prefix="/api", tags=["payments"])


@router.post("/stripe/create-checkout-session", response_model=CheckoutSessionResponse)
def create_checkout_session(data: CheckoutSessionCreate, gateway=Depends(get_payment_gateway)):
    return CheckoutSessionResponse(url=svc.create_checkout_session(gateway, data))


@router.get(
    "/stripe/success",
    response_model=PaymentConfirmation,
    response_model_exclude_none=True,
)
def confirm_payment(
    session_id: str = Query(...),
    hr_id: str = Query(..., alias="hrId"),
    package_type: str = Query(..., alias="packageType"),
    db: Session = Depends(get_db),
    gateway=Depends(get_payment_gateway),
):
    return svc.confirm_payment(db, gateway, session_id, hr_id, package_type)


@router.get("/packages/{hr_id}", response_model=PackageResponse)
def get_package(hr_id: str, db: Session = Depends(get_db)):
    return svc.get_package(db, hr_id)
