from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from typing import List, Optional
from brandsbridge.api.deps import get_db, staff_required
from brandsbridge.models.user import User
from brandsbridge.schemas.brand import (
    BrandResponse, BrandDetailResponse, BrandCreate, BrandUpdate,
)
from brandsbridge.schemas.common import MessageResponse
from brandsbridge.services import brands as brands_service

router = APIRouter(prefix="/api/brands", tags=["brands"])


@router.get("", response_model=List[BrandResponse])
def list_brands(
    include_inactive: bool = Query(False, alias="includeInactive"),
    featured: Optional[bool] = Query(None),
    db: Session = Depends(get_db)
):
    """Список брендов с количеством товаров"""
    return brands_service.list_brands(db, include_inactive=include_inactive, featured=featured)


@router.get("/featured", response_model=List[BrandResponse])
def list_featured_brands(db: Session = Depends(get_db)):
    return brands_service.list_featured_brands(db)


@router.get("/slug/{slug}", response_model=BrandDetailResponse)
def get_brand_by_slug(slug: str, db: Session = Depends(get_db)):
    brand = brands_service.get_brand_by_slug(db, slug)
    return brands_service.build_brand_detail(db, brand)


@router.get("/{brand_id}", response_model=BrandDetailResponse)
def get_brand(brand_id: int, db: Session = Depends(get_db)):
    brand = brands_service.get_brand(db, brand_id)
    return brands_service.build_brand_detail(db, brand)


@router.post("", response_model=BrandResponse, status_code=201)
def create_brand(
    data: BrandCreate,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return brands_service.create_brand(db, data)


@router.patch("/{brand_id}", response_model=BrandResponse)
def update_brand(
    brand_id: int,
    data: BrandUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return brands_service.update_brand(db, brand_id, data)


@router.patch("/{brand_id}/toggle-active", response_model=BrandResponse)
def toggle_brand_active(
    brand_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return brands_service.toggle_brand_active(db, brand_id)


@router.patch("/{brand_id}/toggle-featured", response_model=BrandResponse)
def toggle_brand_featured(
    brand_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return brands_service.toggle_brand_featured(db, brand_id)


@router.delete("/{brand_id}", response_model=MessageResponse)
def delete_brand(
    brand_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return brands_service.delete_brand(db, brand_id)
