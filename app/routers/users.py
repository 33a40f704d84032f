from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.user import UserCreate, UserUpdate, UserResponse, RoleResponse
from app.schemas.common import UserInsertResult, ModifiedResult, DeleteResult
import app.services.user_service as svc

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
def list_users(db: Session = Depends(get_db)):
    return svc.get_users(db)


@router.post("", response_model=UserInsertResult, status_code=201)
def create_user(data: UserCreate, db: Session = Depends(get_db)):
    user = svc.create_user(db, data)
    return UserInsertResult(inserted_id=user.id)


@router.get("/{email}/role", response_model=RoleResponse)
def get_role(email: str, db: Session = Depends(get_db)):
    return RoleResponse(role=svc.get_role_by_email(db, email))


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, db: Session = Depends(get_db)):
    return svc.get_user(db, user_id)


@router.put("/{user_id}", response_model=ModifiedResult)
def update_user(user_id: str, data: UserUpdate, db: Session = Depends(get_db)):
    return ModifiedResult(modified_count=svc.update_user(db, user_id, data))


@router.delete("/{user_id}", response_model=DeleteResult)
def delete_user(user_id: str, db: Session = Depends(get_db)):
    return DeleteResult(message="User deleted", deleted_count=svc.delete_user(db, user_id))
