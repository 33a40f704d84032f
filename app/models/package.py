from datetime import datetime, timezone
from sqlalchemy import String, Integer, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from app.database import Base


class Package(Base):
    """Paid package tier per HR account, written when a checkout is confirmed."""

    __tablename__ = "packages"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    hr_id: Mapped[str] = mapped_column(String(128), unique=True, index=True, nullable=False)
    package_type: Mapped[str] = mapped_column(String(64), nullable=False)
    package_limit: Mapped[int] = mapped_column(Integer, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
