"""Seed script: fills the DB with demo assets, users and requests."""
import os
import sys

# Ensure we're in the project root
sys.path.insert(0, os.path.dirname(__file__))

from app.database import Base, engine, SessionLocal
from app.models.asset import Asset
from app.models.asset_request import AssetRequest, RequestStatus
from app.models.user import User


def seed():
    os.makedirs("data", exist_ok=True)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    users = [
        User(name="Admin HR", email="hr@assetverse.io", role="hr"),
        User(name="Nadia Rahman", email="nadia@assetverse.io", role="employee", team="Engineering"),
        User(name="Tanvir Hasan", email="tanvir@assetverse.io", role="employee", team="Design"),
    ]
    existing_emails = {u.email for u in db.query(User).all()}
    for user in users:
        if user.email not in existing_emails:
            db.add(user)

    # Names are stored normalized (lowercase, trimmed)
    assets_data = [
        ("laptop", 10, "electronics"),
        ("monitor", 15, "electronics"),
        ("keyboard", 25, "accessories"),
        ("office chair", 8, "furniture"),
        ("desk", 6, "furniture"),
        ("headset", 12, "accessories"),
    ]
    existing_names = {a.name for a in db.query(Asset).all()}
    for name, quantity, asset_type in assets_data:
        if name not in existing_names:
            db.add(Asset(name=name, quantity=quantity, type=asset_type))
    db.commit()

    if not db.query(AssetRequest).first():
        by_name = {a.name: a for a in db.query(Asset).all()}
        demo_requests = [
            ("laptop", 1, "New hire", "Nadia Rahman", "nadia@assetverse.io"),
            ("monitor", 2, "Dual screen setup", "Tanvir Hasan", "tanvir@assetverse.io"),
            ("laptop", 1, "Replacement", "Tanvir Hasan", "tanvir@assetverse.io"),
            ("headset", 1, "", "Nadia Rahman", "nadia@assetverse.io"),
        ]
        for name, quantity, reason, user_name, email in demo_requests:
            asset = by_name[name]
            db.add(AssetRequest(
                asset_id=asset.id,
                asset_name=asset.name,
                quantity=quantity,
                reason=reason,
                status=RequestStatus.pending,
                user_name=user_name,
                email=email,
            ))
        db.commit()

    db.close()
    print("Seed complete.")


if __name__ == "__main__":
    seed()
