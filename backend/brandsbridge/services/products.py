from typing import List, Optional
from sqlmodel import Session, select, func
from brandsbridge.core.logging import get_logger
from brandsbridge.models.brand import Brand
from brandsbridge.models.category import Category
from brandsbridge.models.product import Product
from brandsbridge.schemas.product import (
    ProductCreate, ProductUpdate, ProductFilter,
    ProductResponse, ProductListResponse, ProductStatsResponse, GroupCount,
)
from brandsbridge.services import crud
from brandsbridge.services.query import FEATURED_LIMIT, paginate, search_clause, take

logger = get_logger(__name__)

LABEL = "Product"
CONFLICT = "Product with this slug or SKU already exists"
REQUIRED_FIELDS = (
    "name", "slug", "images", "specifications",
    "sort_order", "is_active", "is_featured",
)


def _ordered(stmt):
    return stmt.order_by(Product.sort_order, Product.id)


def build_filter_statement(filters: ProductFilter):
    """Translate the listing options into a constrained, sorted select."""
    stmt = select(Product)

    if not filters.include_inactive:
        stmt = stmt.where(Product.is_active == True)  # noqa: E712

    if filters.category_id is not None:
        stmt = stmt.where(Product.category_id == filters.category_id)

    if filters.brand_id is not None:
        stmt = stmt.where(Product.brand_id == filters.brand_id)

    if filters.featured is not None:
        stmt = stmt.where(Product.is_featured == filters.featured)

    if filters.search:
        stmt = stmt.where(
            search_clause(filters.search, Product.name, Product.description, Product.sku)
        )

    return _ordered(stmt)


def list_products(db: Session, filters: ProductFilter) -> ProductListResponse:
    products, meta = paginate(db, build_filter_statement(filters), filters.page, filters.limit)
    return ProductListResponse(
        data=[ProductResponse.model_validate(p) for p in products],
        meta=meta,
    )


def list_featured_products(db: Session, limit: int = FEATURED_LIMIT) -> List[Product]:
    stmt = select(Product).where(Product.is_active == True, Product.is_featured == True)  # noqa: E712
    return take(db, _ordered(stmt), limit)


def list_products_by_category(db: Session, category_id: int, limit: Optional[int] = None) -> List[Product]:
    stmt = select(Product).where(Product.category_id == category_id, Product.is_active == True)  # noqa: E712
    return take(db, _ordered(stmt), limit)


def list_products_by_brand(db: Session, brand_id: int, limit: Optional[int] = None) -> List[Product]:
    stmt = select(Product).where(Product.brand_id == brand_id, Product.is_active == True)  # noqa: E712
    return take(db, _ordered(stmt), limit)


def get_product(db: Session, product_id: int) -> Product:
    return crud.get_or_404(db, Product, product_id, LABEL)


def get_product_by_slug(db: Session, slug: str) -> Product:
    return crud.get_by_field_or_404(db, Product, "slug", slug, LABEL)


def _check_references(db: Session, changes: dict) -> None:
    if changes.get("category_id") is not None:
        crud.get_or_404(db, Category, changes["category_id"], "Category")
    if changes.get("brand_id") is not None:
        crud.get_or_404(db, Brand, changes["brand_id"], "Brand")


def create_product(db: Session, data: ProductCreate) -> Product:
    crud.ensure_unique(db, Product, "slug", data.slug, LABEL)
    if data.sku:
        crud.ensure_unique(db, Product, "sku", data.sku, LABEL, field_label="SKU")

    values = data.model_dump()
    _check_references(db, values)

    product = Product(**values)
    crud.save(db, product, CONFLICT)
    logger.info("Product created", product_id=product.id, slug=product.slug)
    return product


def update_product(db: Session, product_id: int, data: ProductUpdate) -> Product:
    product = get_product(db, product_id)
    changes = crud.collect_changes(data, REQUIRED_FIELDS)

    if changes.get("slug"):
        crud.ensure_unique(db, Product, "slug", changes["slug"], LABEL, exclude_id=product_id)
    if changes.get("sku"):
        crud.ensure_unique(
            db, Product, "sku", changes["sku"], LABEL,
            field_label="SKU", exclude_id=product_id,
        )
    _check_references(db, changes)

    crud.apply_changes(product, changes)
    crud.save(db, product, CONFLICT)
    logger.info("Product updated", product_id=product_id, fields=sorted(changes))
    return product


def toggle_product_active(db: Session, product_id: int) -> Product:
    return crud.toggle_flag(db, Product, product_id, "is_active", LABEL)


def toggle_product_featured(db: Session, product_id: int) -> Product:
    return crud.toggle_flag(db, Product, product_id, "is_featured", LABEL)


def delete_product(db: Session, product_id: int) -> dict:
    product = get_product(db, product_id)
    return crud.delete_obj(db, product, LABEL)


def get_product_stats(db: Session) -> ProductStatsResponse:
    total = db.exec(select(func.count()).select_from(Product)).one()
    active = db.exec(
        select(func.count()).select_from(Product).where(Product.is_active == True)  # noqa: E712
    ).one()
    featured = db.exec(
        select(func.count()).select_from(Product).where(Product.is_featured == True)  # noqa: E712
    ).one()

    by_category_stmt = (
        select(Category.id, Category.name, func.count(Product.id))
        .join(Product, Product.category_id == Category.id, isouter=True)
        .group_by(Category.id, Category.name, Category.sort_order)
        .order_by(Category.sort_order, Category.id)
    )
    by_brand_stmt = (
        select(Brand.id, Brand.name, func.count(Product.id))
        .join(Product, Product.brand_id == Brand.id, isouter=True)
        .group_by(Brand.id, Brand.name, Brand.sort_order)
        .order_by(Brand.sort_order, Brand.id)
    )

    return ProductStatsResponse(
        total=total,
        active=active,
        featured=featured,
        by_category=[GroupCount(id=i, name=n, count=c) for i, n, c in db.exec(by_category_stmt).all()],
        by_brand=[GroupCount(id=i, name=n, count=c) for i, n, c in db.exec(by_brand_stmt).all()],
    )
