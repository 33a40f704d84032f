from sqlalchemy.orm import Session
from sqlalchemy import select, delete
from app.exceptions import NotFoundError, ValidationError
from app.models.user import User
from app.schemas.user import UserCreate, UserUpdate
from app.services.common import parse_id

DEFAULT_ROLE = "user"


def get_users(db: Session) -> list[User]:
    return db.scalars(select(User).order_by(User.id)).all()


def get_user(db: Session, user_id: str | int) -> User:
    user = db.get(User, parse_id(user_id, "user"))
    if not user:
        raise NotFoundError("User not found")
    return user


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.scalar(select(User).where(User.email == email).order_by(User.id).limit(1))


def get_role_by_email(db: Session, email: str) -> str:
    """Role of the first user registered with ``email``; unknown addresses get the default role."""
    user = get_user_by_email(db, email)
    if not user or not user.role:
        return DEFAULT_ROLE
    return user.role


def create_user(db: Session, data: UserCreate) -> User:
    if not data.name or not data.email or not data.role:
        raise ValidationError("Missing required fields")
    user = User(
        name=data.name,
        email=data.email,
        role=data.role,
        status=data.status or "active",
        team=data.team,
        photo_url=data.photo_url,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def update_user(db: Session, user_id: str | int, data: UserUpdate) -> int:
    """Apply only the fields present (and non-null) in ``data``; returns the modified count."""
    user = get_user(db, user_id)
    update_data = {
        field: value
        for field, value in data.model_dump(exclude_unset=True).items()
        if value is not None
    }
    changed = {field: value for field, value in update_data.items() if getattr(user, field) != value}
    if not changed:
        return 0
    for field, value in changed.items():
        setattr(user, field, value)
    db.commit()
    return 1


def delete_user(db: Session, user_id: str | int) -> int:
    pk = parse_id(user_id, "user")
    result = db.execute(delete(User).where(User.id == pk))
    db.commit()
    return result.rowcount
