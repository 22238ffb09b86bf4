from typing import Dict, List, Optional
from sqlmodel import Session, select
from brandsbridge.core.logging import get_logger
from brandsbridge.models.content import (
    Content, Setting, Statistic, CompanyValue, Service, Partner, PartnerType,
)
from brandsbridge.schemas.content import ContentCreate, ContentUpdate, ContentEntry
from brandsbridge.services import crud
from brandsbridge.services.query import take

logger = get_logger(__name__)

LABEL = "Content"
KEY_CONFLICT = "Content with this key already exists"


# === Key-value aggregation ===

def get_public_content(db: Session) -> Dict[str, ContentEntry]:
    """All content rows folded into ``key -> {value, valueAr, type}``."""
    contents = db.exec(select(Content).order_by(Content.id)).all()

    result: Dict[str, ContentEntry] = {}
    for content in contents:
        # a repeated key keeps the row read last
        result[content.key] = ContentEntry(
            value=content.value,
            value_ar=content.value_ar,
            type=content.type,
        )
    return result


def get_settings(db: Session, group: Optional[str] = None) -> Dict[str, str]:
    """Settings folded into ``key -> value``; type and group are dropped."""
    stmt = select(Setting)
    if group:
        stmt = stmt.where(Setting.group == group)

    return {setting.key: setting.value for setting in db.exec(stmt.order_by(Setting.id)).all()}


def update_setting(db: Session, key: str, value: str) -> Setting:
    setting = crud.get_by_field_or_404(db, Setting, "key", key, "Setting")
    crud.apply_changes(setting, {"value": value})
    db.add(setting)
    db.commit()
    db.refresh(setting)
    logger.info("Setting updated", key=key)
    return setting


# === Content CRUD (admin) ===

def list_content(db: Session, section: Optional[str] = None) -> List[Content]:
    stmt = select(Content)
    if section:
        stmt = stmt.where(Content.section == section)
    return take(db, stmt.order_by(Content.key))


def get_content(db: Session, key: str) -> Content:
    return crud.get_by_field_or_404(db, Content, "key", key, LABEL)


def create_content(db: Session, data: ContentCreate) -> Content:
    crud.ensure_unique(db, Content, "key", data.key, LABEL)

    content = Content(**data.model_dump())
    crud.save(db, content, KEY_CONFLICT)
    logger.info("Content created", key=content.key)
    return content


def update_content(db: Session, key: str, data: ContentUpdate) -> Content:
    content = get_content(db, key)
    changes = crud.collect_changes(data, ("type", "value"))

    crud.apply_changes(content, changes)
    crud.save(db, content, KEY_CONFLICT)
    logger.info("Content updated", key=key, fields=sorted(changes))
    return content


def delete_content(db: Session, key: str) -> dict:
    content = get_content(db, key)
    return crud.delete_obj(db, content, LABEL)


# === Display blocks (public) ===

def list_statistics(db: Session) -> List[Statistic]:
    stmt = select(Statistic).where(Statistic.is_active == True)  # noqa: E712
    return take(db, stmt.order_by(Statistic.sort_order, Statistic.id))


def list_values(db: Session) -> List[CompanyValue]:
    stmt = select(CompanyValue).where(CompanyValue.is_active == True)  # noqa: E712
    return take(db, stmt.order_by(CompanyValue.sort_order, CompanyValue.id))


def list_services(db: Session) -> List[Service]:
    stmt = select(Service).where(Service.is_active == True)  # noqa: E712
    return take(db, stmt.order_by(Service.sort_order, Service.id))


def list_partners(db: Session, type: Optional[PartnerType] = None) -> List[Partner]:
    stmt = select(Partner).where(Partner.is_active == True)  # noqa: E712
    if type is not None:
        stmt = stmt.where(Partner.type == type)
    return take(db, stmt.order_by(Partner.sort_order, Partner.id))
