from typing import Dict, List
from sqlalchemy import update
from sqlmodel import Session, select, func
from brandsbridge.core.logging import get_logger
from brandsbridge.models.category import Category
from brandsbridge.models.product import Product
from brandsbridge.schemas.category import (
    CategoryResponse, CategoryDetailResponse, CategoryCreate, CategoryUpdate,
)
from brandsbridge.schemas.product import ProductResponse
from brandsbridge.services import crud
from brandsbridge.services.query import take

logger = get_logger(__name__)

LABEL = "Category"
SLUG_CONFLICT = "Category with this slug already exists"
REQUIRED_FIELDS = ("name", "slug", "sort_order", "is_active")


def product_counts(db: Session) -> Dict[int, int]:
    """Количество товаров по категориям (включая неактивные)"""
    stmt = (
        select(Product.category_id, func.count())
        .where(Product.category_id != None)  # noqa: E711
        .group_by(Product.category_id)
    )
    return {category_id: count for category_id, count in db.exec(stmt).all()}


def list_categories(db: Session, include_inactive: bool = False) -> List[CategoryResponse]:
    stmt = select(Category)
    if not include_inactive:
        stmt = stmt.where(Category.is_active == True)  # noqa: E712
    stmt = stmt.order_by(Category.sort_order, Category.id)

    counts = product_counts(db)
    result = []
    for category in db.exec(stmt).all():
        item = CategoryResponse.model_validate(category)
        item.product_count = counts.get(category.id, 0)
        result.append(item)
    return result


def get_category(db: Session, category_id: int) -> Category:
    return crud.get_or_404(db, Category, category_id, LABEL)


def get_category_by_slug(db: Session, slug: str) -> Category:
    return crud.get_by_field_or_404(db, Category, "slug", slug, LABEL)


def build_category_detail(db: Session, category: Category) -> CategoryDetailResponse:
    """Категория вместе с её активными товарами"""
    stmt = (
        select(Product)
        .where(Product.category_id == category.id, Product.is_active == True)  # noqa: E712
        .order_by(Product.sort_order, Product.id)
    )
    products = take(db, stmt)
    detail = CategoryDetailResponse.model_validate(category)
    detail.products = [ProductResponse.model_validate(p) for p in products]
    detail.product_count = product_counts(db).get(category.id, 0)
    return detail


def create_category(db: Session, data: CategoryCreate) -> Category:
    crud.ensure_unique(db, Category, "slug", data.slug, LABEL)

    category = Category(**data.model_dump())
    crud.save(db, category, SLUG_CONFLICT)
    logger.info("Category created", category_id=category.id, slug=category.slug)
    return category


def update_category(db: Session, category_id: int, data: CategoryUpdate) -> Category:
    category = get_category(db, category_id)
    changes = crud.collect_changes(data, REQUIRED_FIELDS)

    if changes.get("slug"):
        crud.ensure_unique(db, Category, "slug", changes["slug"], LABEL, exclude_id=category_id)

    crud.apply_changes(category, changes)
    crud.save(db, category, SLUG_CONFLICT)
    logger.info("Category updated", category_id=category_id, fields=sorted(changes))
    return category


def toggle_category_active(db: Session, category_id: int) -> Category:
    return crud.toggle_flag(db, Category, category_id, "is_active", LABEL)


def delete_category(db: Session, category_id: int) -> dict:
    """Удаляет категорию; товары остаются без категории"""
    category = get_category(db, category_id)
    db.execute(
        update(Product)
        .where(Product.category_id == category_id)
        .values(category_id=None)
        .execution_options(synchronize_session=False)
    )
    return crud.delete_obj(db, category, LABEL)
