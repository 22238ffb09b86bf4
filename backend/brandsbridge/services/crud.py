"""
Shared building blocks of the mutation layer.

Every create/update first checks its natural keys and every id-based write
first checks existence, so callers get NotFound/Conflict before anything is
written. The store-level unique constraints catch whatever slips between the
check and the commit.
"""
from typing import Any, Optional, Type, TypeVar
from sqlalchemy import update, not_
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, select
from brandsbridge.core.exceptions import NotFoundError, ConflictError
from brandsbridge.core.logging import get_logger
from brandsbridge.models.base import utcnow

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


def get_or_404(db: Session, model: Type[ModelT], obj_id: Any, label: str) -> ModelT:
    obj = db.get(model, obj_id)
    if not obj:
        raise NotFoundError(f"{label} not found")
    return obj


def get_by_field_or_404(db: Session, model: Type[ModelT], field: str, value: Any, label: str) -> ModelT:
    obj = db.exec(select(model).where(getattr(model, field) == value)).first()
    if not obj:
        raise NotFoundError(f"{label} not found")
    return obj


def ensure_unique(
    db: Session,
    model: Type[ModelT],
    field: str,
    value: Any,
    label: str,
    field_label: Optional[str] = None,
    exclude_id: Optional[int] = None,
) -> None:
    """Raise ConflictError if another row already holds ``value`` in ``field``."""
    stmt = select(model).where(getattr(model, field) == value)
    if exclude_id is not None:
        stmt = stmt.where(model.id != exclude_id)
    if db.exec(stmt).first():
        raise ConflictError(f"{label} with this {field_label or field} already exists")


def save(db: Session, obj: ModelT, conflict_message: str) -> ModelT:
    """Commit ``obj``; a unique-constraint violation at commit becomes a Conflict."""
    db.add(obj)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Unique constraint violated on commit", table=obj.__tablename__)
        raise ConflictError(conflict_message)
    db.refresh(obj)
    return obj


def apply_changes(obj: SQLModel, changes: dict) -> None:
    """Partial update: only the provided fields are written."""
    for key, value in changes.items():
        setattr(obj, key, value)
    if hasattr(obj, "updated_at"):
        obj.updated_at = utcnow()


def toggle_flag(db: Session, model: Type[ModelT], obj_id: int, flag: str, label: str) -> ModelT:
    """Flip a boolean column in a single UPDATE statement."""
    obj = get_or_404(db, model, obj_id, label)
    column = getattr(model, flag)
    values = {flag: not_(column)}
    if hasattr(model, "updated_at"):
        values["updated_at"] = utcnow()
    db.execute(
        update(model)
        .where(model.id == obj_id)
        .values(values)
        .execution_options(synchronize_session=False)
    )
    db.commit()
    db.refresh(obj)
    logger.info("Flag toggled", table=model.__tablename__, id=obj_id, flag=flag, value=getattr(obj, flag))
    return obj


def delete_obj(db: Session, obj: SQLModel, label: str) -> dict:
    obj_id = getattr(obj, "id", None)
    db.delete(obj)
    db.commit()
    logger.info("Row deleted", table=obj.__tablename__, id=obj_id)
    return {"message": f"{label} deleted successfully"}


def collect_changes(data, required: tuple = ()) -> dict:
    """Fields explicitly sent by the client; ``None`` is ignored for NOT NULL columns."""
    changes = data.model_dump(exclude_unset=True)
    return {
        key: value for key, value in changes.items()
        if not (value is None and key in required)
    }
