from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from typing import List
from brandsbridge.api.deps import get_db, staff_required
from brandsbridge.models.user import User
from brandsbridge.schemas.category import (
    CategoryResponse, CategoryDetailResponse, CategoryCreate, CategoryUpdate,
)
from brandsbridge.schemas.common import MessageResponse
from brandsbridge.services import categories as categories_service

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=List[CategoryResponse])
def list_categories(
    include_inactive: bool = Query(False, alias="includeInactive"),
    db: Session = Depends(get_db)
):
    """Список категорий с количеством товаров"""
    return categories_service.list_categories(db, include_inactive=include_inactive)


@router.get("/slug/{slug}", response_model=CategoryDetailResponse)
def get_category_by_slug(slug: str, db: Session = Depends(get_db)):
    category = categories_service.get_category_by_slug(db, slug)
    return categories_service.build_category_detail(db, category)


@router.get("/{category_id}", response_model=CategoryDetailResponse)
def get_category(category_id: int, db: Session = Depends(get_db)):
    category = categories_service.get_category(db, category_id)
    return categories_service.build_category_detail(db, category)


@router.post("", response_model=CategoryResponse, status_code=201)
def create_category(
    data: CategoryCreate,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return categories_service.create_category(db, data)


@router.patch("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    data: CategoryUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return categories_service.update_category(db, category_id, data)


@router.patch("/{category_id}/toggle-active", response_model=CategoryResponse)
def toggle_category_active(
    category_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return categories_service.toggle_category_active(db, category_id)


@router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(
    category_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    """Удаление категории (товары остаются без категории)"""
    return categories_service.delete_category(db, category_id)
