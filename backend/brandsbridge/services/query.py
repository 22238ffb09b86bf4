from math import ceil
from typing import Any, List, Optional, Tuple
from sqlalchemy import or_
from sqlmodel import Session, select, func, col
from brandsbridge.schemas.common import PageMeta

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
FEATURED_LIMIT = 8


def search_clause(search: str, *columns: Any):
    """OR of case-insensitive substring matches over the given columns."""
    return or_(*(col(column).icontains(search, autoescape=True) for column in columns))


def count_rows(db: Session, stmt) -> int:
    """Total matching rows for a select, ignoring its ordering and window."""
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    return db.exec(count_stmt).one()


def page_window(page: int, limit: int) -> Tuple[int, int]:
    """Offset and size of the ``[(page-1)*limit, page*limit)`` window."""
    return (page - 1) * limit, limit


def build_meta(total: int, page: int, limit: int) -> PageMeta:
    return PageMeta(
        total=total,
        page=page,
        limit=limit,
        total_pages=ceil(total / limit),
    )


def paginate(db: Session, stmt, page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> Tuple[List[Any], PageMeta]:
    total = count_rows(db, stmt)
    offset, size = page_window(page, limit)
    rows = db.exec(stmt.offset(offset).limit(size)).all()
    return list(rows), build_meta(total, page, limit)


def take(db: Session, stmt, limit: Optional[int] = None) -> List[Any]:
    if limit is not None:
        stmt = stmt.limit(limit)
    return list(db.exec(stmt).all())
