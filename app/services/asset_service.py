from sqlalchemy.orm import Session
from sqlalchemy import select, delete
from app.exceptions import NotFoundError, ValidationError
from app.models.asset import Asset
from app.schemas.asset import AssetCreate, AssetUpdate
from app.services.common import parse_id, normalize_name


def get_assets(db: Session) -> list[Asset]:
    return db.scalars(select(Asset).order_by(Asset.id)).all()


def get_asset(db: Session, asset_id: str | int) -> Asset:
    asset = db.get(Asset, parse_id(asset_id, "asset"))
    if not asset:
        raise NotFoundError("Asset not found")
    return asset


def create_asset(db: Session, data: AssetCreate) -> Asset:
    if not data.name or not data.name.strip():
        raise ValidationError("Asset name is required")
    asset = Asset(
        name=normalize_name(data.name),
        quantity=data.quantity,
        image=data.image,
        type=data.type,
    )
    db.add(asset)
    db.commit()
    db.refresh(asset)
    return asset


def update_asset(db: Session, asset_id: str | int, data: AssetUpdate) -> int:
    """Replace name/quantity/image/type; returns the number of modified records (0 or 1)."""
    pk = parse_id(asset_id, "asset")
    if not data.name or data.quantity is None or not data.type:
        raise ValidationError("Missing required fields")

    asset = db.get(Asset, pk)
    if not asset:
        raise NotFoundError("Asset not found")

    values = {
        "name": normalize_name(data.name),
        "quantity": data.quantity,
        "image": data.image or None,
        "type": data.type,
    }
    changed = {field: value for field, value in values.items() if getattr(asset, field) != value}
    if not changed:
        return 0
    for field, value in changed.items():
        setattr(asset, field, value)
    db.commit()
    return 1


def delete_asset(db: Session, asset_id: str | int) -> int:
    """Delete by id without an existence check; returns the deleted count."""
    pk = parse_id(asset_id, "asset")
    result = db.execute(delete(Asset).where(Asset.id == pk))
    db.commit()
    return result.rowcount
