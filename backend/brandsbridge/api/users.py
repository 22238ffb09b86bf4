from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import List
from brandsbridge.api.deps import get_db, super_admin_required
from brandsbridge.models.user import User
from brandsbridge.schemas.common import MessageResponse
from brandsbridge.schemas.user import UserResponse, UserCreate, UserUpdate
from brandsbridge.services import users as users_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=List[UserResponse])
def list_users(
    db: Session = Depends(get_db),
    admin: User = Depends(super_admin_required)
):
    return users_service.list_users(db)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(super_admin_required)
):
    return users_service.get_user(db, user_id)


@router.post("", response_model=UserResponse, status_code=201)
def create_user(
    data: UserCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(super_admin_required)
):
    return users_service.create_user(db, data)


@router.patch("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    data: UserUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(super_admin_required)
):
    return users_service.update_user(db, user_id, data)


@router.delete("/{user_id}", response_model=MessageResponse)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(super_admin_required)
):
    return users_service.delete_user(db, user_id, admin)
