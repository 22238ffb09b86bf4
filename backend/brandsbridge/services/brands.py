from typing import Dict, List, Optional
from sqlalchemy import update
from sqlmodel import Session, select, func
from brandsbridge.core.logging import get_logger
from brandsbridge.models.brand import Brand
from brandsbridge.models.product import Product
from brandsbridge.schemas.brand import (
    BrandResponse, BrandDetailResponse, BrandCreate, BrandUpdate,
)
from brandsbridge.schemas.product import ProductResponse
from brandsbridge.services import crud
from brandsbridge.services.query import take

logger = get_logger(__name__)

LABEL = "Brand"
SLUG_CONFLICT = "Brand with this slug already exists"
REQUIRED_FIELDS = ("name", "slug", "sort_order", "is_active", "is_featured")


def product_counts(db: Session) -> Dict[int, int]:
    stmt = (
        select(Product.brand_id, func.count())
        .where(Product.brand_id != None)  # noqa: E711
        .group_by(Product.brand_id)
    )
    return {brand_id: count for brand_id, count in db.exec(stmt).all()}


def list_brands(
    db: Session,
    include_inactive: bool = False,
    featured: Optional[bool] = None,
) -> List[BrandResponse]:
    stmt = select(Brand)
    if not include_inactive:
        stmt = stmt.where(Brand.is_active == True)  # noqa: E712
    if featured is not None:
        stmt = stmt.where(Brand.is_featured == featured)
    stmt = stmt.order_by(Brand.sort_order, Brand.id)

    counts = product_counts(db)
    result = []
    for brand in db.exec(stmt).all():
        item = BrandResponse.model_validate(brand)
        item.product_count = counts.get(brand.id, 0)
        result.append(item)
    return result


def list_featured_brands(db: Session) -> List[Brand]:
    stmt = (
        select(Brand)
        .where(Brand.is_active == True, Brand.is_featured == True)  # noqa: E712
        .order_by(Brand.sort_order, Brand.id)
    )
    return take(db, stmt)


def get_brand(db: Session, brand_id: int) -> Brand:
    return crud.get_or_404(db, Brand, brand_id, LABEL)


def get_brand_by_slug(db: Session, slug: str) -> Brand:
    return crud.get_by_field_or_404(db, Brand, "slug", slug, LABEL)


def build_brand_detail(db: Session, brand: Brand) -> BrandDetailResponse:
    stmt = (
        select(Product)
        .where(Product.brand_id == brand.id, Product.is_active == True)  # noqa: E712
        .order_by(Product.sort_order, Product.id)
    )
    detail = BrandDetailResponse.model_validate(brand)
    detail.products = [ProductResponse.model_validate(p) for p in take(db, stmt)]
    detail.product_count = product_counts(db).get(brand.id, 0)
    return detail


def create_brand(db: Session, data: BrandCreate) -> Brand:
    crud.ensure_unique(db, Brand, "slug", data.slug, LABEL)

    brand = Brand(**data.model_dump())
    crud.save(db, brand, SLUG_CONFLICT)
    logger.info("Brand created", brand_id=brand.id, slug=brand.slug)
    return brand


def update_brand(db: Session, brand_id: int, data: BrandUpdate) -> Brand:
    brand = get_brand(db, brand_id)
    changes = crud.collect_changes(data, REQUIRED_FIELDS)

    if changes.get("slug"):
        crud.ensure_unique(db, Brand, "slug", changes["slug"], LABEL, exclude_id=brand_id)

    crud.apply_changes(brand, changes)
    crud.save(db, brand, SLUG_CONFLICT)
    logger.info("Brand updated", brand_id=brand_id, fields=sorted(changes))
    return brand


def toggle_brand_active(db: Session, brand_id: int) -> Brand:
    return crud.toggle_flag(db, Brand, brand_id, "is_active", LABEL)


def toggle_brand_featured(db: Session, brand_id: int) -> Brand:
    return crud.toggle_flag(db, Brand, brand_id, "is_featured", LABEL)


def delete_brand(db: Session, brand_id: int) -> dict:
    brand = get_brand(db, brand_id)
    db.execute(
        update(Product)
        .where(Product.brand_id == brand_id)
        .values(brand_id=None)
        .execution_options(synchronize_session=False)
    )
    return crud.delete_obj(db, brand, LABEL)
