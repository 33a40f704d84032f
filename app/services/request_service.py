import logging
from sqlalchemy.orm import Session
from sqlalchemy import select, update, delete
from app.exceptions import NotFoundError, InsufficientStockError, TransitionError
from app.models.asset import Asset
from app.models.asset_request import AssetRequest, RequestStatus
from app.schemas.asset_request import AssetRequestCreate
from app.services.common import parse_id

logger = logging.getLogger(__name__)


def get_requests(db: Session) -> list[AssetRequest]:
    return db.scalars(
        select(AssetRequest).order_by(AssetRequest.created_at.desc(), AssetRequest.id.desc())
    ).all()


def get_request(db: Session, request_id: str | int) -> AssetRequest:
    req = db.get(AssetRequest, parse_id(request_id, "request"))
    if not req:
        raise NotFoundError("Request not found")
    return req


def create_request(db: Session, data: AssetRequestCreate) -> AssetRequest:
    asset = db.get(Asset, parse_id(data.asset_id, "asset"))
    if not asset:
        raise NotFoundError("Asset not found")

    req = AssetRequest(
        asset_id=asset.id,
        asset_name=asset.name,
        quantity=data.quantity,
        reason=data.reason or "",
        status=RequestStatus.pending,
        user_name=data.user_name or "Anonymous",
        email=data.email or "unknown",
    )
    db.add(req)
    db.commit()
    db.refresh(req)
    logger.info("Request %s filed for asset %s (qty %s)", req.id, asset.id, req.quantity)
    return req


def approve_request(db: Session, request_id: str | int) -> AssetRequest:
    """Decrement stock and mark the request approved in one transaction.

    The decrement is a conditional UPDATE (``quantity >= requested``), so two
    approvals racing on the same asset cannot both take the last units. The
    status flip is conditional on ``pending`` for the same reason. If either
    statement matches nothing the transaction is rolled back.
    """
    req = get_request(db, request_id)
    if req.status != RequestStatus.pending:
        raise TransitionError(f"Request is already {req.status.value}")

    try:
        decremented = db.execute(
            update(Asset)
            .where(Asset.id == req.asset_id, Asset.quantity >= req.quantity)
            .values(quantity=Asset.quantity - req.quantity)
            .execution_options(synchronize_session=False)
        ).rowcount
        if not decremented:
            if db.get(Asset, req.asset_id) is None:
                raise NotFoundError("Asset not found")
            logger.warning(
                "Request %s rejected by stock check: asset %s short of %s",
                req.id, req.asset_id, req.quantity,
            )
            raise InsufficientStockError()

        flipped = db.execute(
            update(AssetRequest)
            .where(AssetRequest.id == req.id, AssetRequest.status == RequestStatus.pending)
            .values(status=RequestStatus.approved)
            .execution_options(synchronize_session=False)
        ).rowcount
        if not flipped:
            raise TransitionError("Request is no longer pending")

        db.commit()
    except Exception:
        db.rollback()
        raise

    db.expire_all()
    logger.info("Request %s approved; asset %s decremented by %s", req.id, req.asset_id, req.quantity)
    return get_request(db, req.id)


def reject_request(db: Session, request_id: str | int) -> AssetRequest:
    req = get_request(db, request_id)
    flipped = db.execute(
        update(AssetRequest)
        .where(AssetRequest.id == req.id, AssetRequest.status == RequestStatus.pending)
        .values(status=RequestStatus.rejected)
        .execution_options(synchronize_session=False)
    ).rowcount
    if not flipped:
        db.rollback()
        # status may have moved since it was read; report the stored one
        current = db.get(AssetRequest, req.id)
        if current is None:
            raise NotFoundError("Request not found")
        raise TransitionError(f"Request is already {current.status.value}")
    db.commit()
    db.expire_all()
    logger.info("Request %s rejected", req.id)
    return get_request(db, req.id)


def delete_request(db: Session, request_id: str | int) -> int:
    """Delete unconditionally. Stock taken by an approved request is not restored."""
    pk = parse_id(request_id, "request")
    result = db.execute(delete(AssetRequest).where(AssetRequest.id == pk))
    db.commit()
    return result.rowcount
