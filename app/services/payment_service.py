import logging
from urllib.parse import urlencode
from sqlalchemy.orm import Session
from sqlalchemy import select
from app.config import settings
from app.exceptions import NotFoundError, PaymentGatewayError
from app.models.package import Package
from app.schemas.payment import CheckoutSessionCreate

logger = logging.getLogger(__name__)

PACKAGE_LIMITS = {"Basic": 5, "Standard": 20, "Premium": 50}
DEFAULT_PACKAGE_LIMIT = 5


def package_limit_for(package_type: str) -> int:
    return PACKAGE_LIMITS.get(package_type, DEFAULT_PACKAGE_LIMIT)


def create_checkout_session(gateway, data: CheckoutSessionCreate) -> str:
    """Open a one-item checkout for the package and return its redirect URL."""
    query = urlencode({"hrId": data.hr_id, "packageType": data.package_type})
    try:
        session = gateway.create_checkout_session(
            payment_method_types=["card"],
            line_items=[
                {
                    "price_data": {
                        "currency": settings.CHECKOUT_CURRENCY,
                        "product_data": {"name": f"AssetVerse {data.package_type} Package"},
                        "unit_amount": round(data.amount * 100),
                    },
                    "quantity": 1,
                }
            ],
            mode="payment",
            success_url=(
                f"{settings.CLIENT_URL}/packageUpgrade/upgrade-success"
                f"?session_id={{CHECKOUT_SESSION_ID}}&{query}"
            ),
            cancel_url=f"{settings.CLIENT_URL}/packageUpgrade/upgrade-cancel",
        )
        url = session.url
    except Exception:
        logger.exception("Checkout session creation failed for hr %s", data.hr_id)
        raise PaymentGatewayError("Stripe session creation failed")
    return url


def confirm_payment(
    db: Session,
    gateway,
    session_id: str,
    hr_id: str,
    package_type: str,
) -> dict:
    try:
        session = gateway.retrieve_checkout_session(session_id)
        paid = session.payment_status == "paid"
    except Exception:
        logger.exception("Could not verify checkout session %s", session_id)
        raise PaymentGatewayError("Error verifying payment.")

    if not paid:
        return {"success": False}

    package = upsert_package(db, hr_id, package_type)
    logger.info("Package %s (limit %s) recorded for hr %s", package.package_type, package.package_limit, hr_id)
    return {
        "success": True,
        "packageType": package.package_type,
        "packageLimit": package.package_limit,
    }


def upsert_package(db: Session, hr_id: str, package_type: str) -> Package:
    limit = package_limit_for(package_type)
    package = db.scalar(select(Package).where(Package.hr_id == hr_id))
    if package:
        package.package_type = package_type
        package.package_limit = limit
    else:
        package = Package(hr_id=hr_id, package_type=package_type, package_limit=limit)
        db.add(package)
    db.commit()
    db.refresh(package)
    return package


def get_package(db: Session, hr_id: str) -> Package:
    package = db.scalar(select(Package).where(Package.hr_id == hr_id))
    if not package:
        raise NotFoundError("Package not found")
    return package
