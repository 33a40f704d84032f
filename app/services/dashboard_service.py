from collections import Counter
from sqlalchemy.orm import Session
from sqlalchemy import select, func
from app.models.asset import Asset
from app.models.asset_request import AssetRequest

TOP_REQUESTED_LIMIT = 5


def asset_type_distribution(db: Session) -> list[dict]:
    rows = db.execute(
        select(Asset.type, func.count(Asset.id)).group_by(Asset.type).order_by(Asset.type)
    ).all()
    return [{"_id": asset_type, "count": count} for asset_type, count in rows]


def top_requested_assets(db: Session, limit: int = TOP_REQUESTED_LIMIT) -> list[dict]:
    """Most requested asset names across all requests, whatever their status.

    Counter keeps first-seen order and ``most_common`` sorts stably, so ties
    rank in the order their first request was filed.
    """
    names = db.scalars(select(AssetRequest.asset_name).order_by(AssetRequest.id)).all()
    return [{"_id": name, "count": count} for name, count in Counter(names).most_common(limit)]
