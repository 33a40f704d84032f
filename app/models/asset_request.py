import enum
from datetime import datetime, timezone
from sqlalchemy import String, Integer, DateTime, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column
from app.database import Base


class RequestStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class AssetRequest(Base):
    """A claim against an asset's stock.

    ``asset_id`` is a plain column, not a foreign key: deleting the asset
    leaves its requests in place. ``asset_name`` is copied from the asset
    when the request is filed and is not kept in sync afterwards.
    """

    __tablename__ = "asset_requests"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    asset_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    asset_name: Mapped[str] = mapped_column(String(255), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    reason: Mapped[str] = mapped_column(String(2000), default="", nullable=False)
    status: Mapped[str] = mapped_column(
        SAEnum(RequestStatus, values_callable=lambda e: [x.value for x in e]),
        default=RequestStatus.pending,
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True,
    )
    user_name: Mapped[str] = mapped_column(String(255), default="Anonymous", nullable=False)
    email: Mapped[str] = mapped_column(String(255), default="unknown", nullable=False)
