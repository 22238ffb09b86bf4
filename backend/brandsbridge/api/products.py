from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from typing import Optional, List
from brandsbridge.api.deps import get_db, staff_required
from brandsbridge.models.user import User
from brandsbridge.schemas.common import MessageResponse
from brandsbridge.schemas.product import (
    ProductResponse, ProductListResponse, ProductFilter,
    ProductCreate, ProductUpdate, ProductStatsResponse,
)
from brandsbridge.services import products as products_service
from brandsbridge.services.query import DEFAULT_LIMIT, FEATURED_LIMIT

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=ProductListResponse)
def list_products(
    search: Optional[str] = Query(None, description="Search in name, description, SKU"),
    category_id: Optional[int] = Query(None, alias="categoryId"),
    brand_id: Optional[int] = Query(None, alias="brandId"),
    featured: Optional[bool] = Query(None),
    include_inactive: bool = Query(False, alias="includeInactive"),
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1),
    db: Session = Depends(get_db)
):
    """Список товаров с фильтрами и пагинацией"""
    filters = ProductFilter(
        search=search,
        category_id=category_id,
        brand_id=brand_id,
        featured=featured,
        include_inactive=include_inactive,
        page=page,
        limit=limit,
    )
    return products_service.list_products(db, filters)


@router.get("/featured", response_model=List[ProductResponse])
def list_featured_products(
    limit: int = Query(FEATURED_LIMIT, ge=1),
    db: Session = Depends(get_db)
):
    return products_service.list_featured_products(db, limit)


@router.get("/stats", response_model=ProductStatsResponse)
def get_product_stats(
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    """Статистика для дашборда"""
    return products_service.get_product_stats(db)


@router.get("/slug/{slug}", response_model=ProductResponse)
def get_product_by_slug(slug: str, db: Session = Depends(get_db)):
    return products_service.get_product_by_slug(db, slug)


@router.get("/category/{category_id}", response_model=List[ProductResponse])
def list_products_by_category(
    category_id: int,
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db)
):
    return products_service.list_products_by_category(db, category_id, limit)


@router.get("/brand/{brand_id}", response_model=List[ProductResponse])
def list_products_by_brand(
    brand_id: int,
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db)
):
    return products_service.list_products_by_brand(db, brand_id, limit)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return products_service.get_product(db, product_id)


@router.post("", response_model=ProductResponse, status_code=201)
def create_product(
    data: ProductCreate,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return products_service.create_product(db, data)


@router.patch("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    data: ProductUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return products_service.update_product(db, product_id, data)


@router.patch("/{product_id}/toggle-active", response_model=ProductResponse)
def toggle_product_active(
    product_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return products_service.toggle_product_active(db, product_id)


@router.patch("/{product_id}/toggle-featured", response_model=ProductResponse)
def toggle_product_featured(
    product_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return products_service.toggle_product_featured(db, product_id)


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return products_service.delete_product(db, product_id)
