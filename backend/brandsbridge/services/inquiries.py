from sqlmodel import Session, select, func
from brandsbridge.core.logging import get_logger
from brandsbridge.models.base import utcnow
from brandsbridge.models.inquiry import Inquiry, InquiryStatus
from brandsbridge.schemas.inquiry import (
    InquiryCreate, InquiryUpdate, InquiryFilter,
    InquiryResponse, InquiryListResponse, InquiryStatsResponse, RecentInquiry,
)
from brandsbridge.services import crud
from brandsbridge.services.query import paginate, search_clause

logger = get_logger(__name__)

LABEL = "Inquiry"
RECENT_LIMIT = 5


def _label(value) -> str:
    return getattr(value, "value", value)


def create_inquiry(db: Session, data: InquiryCreate) -> Inquiry:
    """Публичная заявка с формы обратной связи"""
    inquiry = Inquiry(**data.model_dump())
    db.add(inquiry)
    db.commit()
    db.refresh(inquiry)
    logger.info("Inquiry submitted", inquiry_id=inquiry.id, type=inquiry.type.value)
    return inquiry


def build_filter_statement(filters: InquiryFilter):
    stmt = select(Inquiry)

    if filters.type is not None:
        stmt = stmt.where(Inquiry.type == filters.type)

    if filters.status is not None:
        stmt = stmt.where(Inquiry.status == filters.status)

    if filters.search:
        stmt = stmt.where(
            search_clause(
                filters.search,
                Inquiry.first_name, Inquiry.last_name, Inquiry.email,
                Inquiry.company, Inquiry.subject,
            )
        )

    return stmt.order_by(Inquiry.created_at.desc(), Inquiry.id.desc())


def list_inquiries(db: Session, filters: InquiryFilter) -> InquiryListResponse:
    inquiries, meta = paginate(db, build_filter_statement(filters), filters.page, filters.limit)
    return InquiryListResponse(
        data=[InquiryResponse.model_validate(i) for i in inquiries],
        meta=meta,
    )


def get_inquiry(db: Session, inquiry_id: int) -> Inquiry:
    return crud.get_or_404(db, Inquiry, inquiry_id, LABEL)


def _stamp_status(changes: dict) -> dict:
    # respondedAt is (re)stamped on every transition into RESPONDED and never cleared
    if changes.get("status") == InquiryStatus.RESPONDED:
        changes["responded_at"] = utcnow()
    return changes


def update_inquiry(db: Session, inquiry_id: int, data: InquiryUpdate) -> Inquiry:
    inquiry = get_inquiry(db, inquiry_id)
    changes = _stamp_status(crud.collect_changes(data, ("status",)))

    crud.apply_changes(inquiry, changes)
    db.add(inquiry)
    db.commit()
    db.refresh(inquiry)
    logger.info("Inquiry updated", inquiry_id=inquiry_id, fields=sorted(changes))
    return inquiry


def update_inquiry_status(db: Session, inquiry_id: int, status: InquiryStatus) -> Inquiry:
    """Any status may follow any other; RESPONDED also stamps respondedAt."""
    inquiry = get_inquiry(db, inquiry_id)

    crud.apply_changes(inquiry, _stamp_status({"status": status}))
    db.add(inquiry)
    db.commit()
    db.refresh(inquiry)
    logger.info("Inquiry status changed", inquiry_id=inquiry_id, status=status.value)
    return inquiry


def add_inquiry_note(db: Session, inquiry_id: int, notes: str) -> Inquiry:
    inquiry = get_inquiry(db, inquiry_id)

    crud.apply_changes(inquiry, {"notes": notes})
    db.add(inquiry)
    db.commit()
    db.refresh(inquiry)
    return inquiry


def delete_inquiry(db: Session, inquiry_id: int) -> dict:
    inquiry = get_inquiry(db, inquiry_id)
    return crud.delete_obj(db, inquiry, LABEL)


def get_inquiry_stats(db: Session) -> InquiryStatsResponse:
    """Сводка для дашборда: всего, по статусам, по типам и 5 последних"""
    total = db.exec(select(func.count()).select_from(Inquiry)).one()

    by_status_stmt = select(Inquiry.status, func.count()).group_by(Inquiry.status)
    by_type_stmt = select(Inquiry.type, func.count()).group_by(Inquiry.type)
    recent_stmt = (
        select(Inquiry)
        .order_by(Inquiry.created_at.desc(), Inquiry.id.desc())
        .limit(RECENT_LIMIT)
    )

    return InquiryStatsResponse(
        total=total,
        by_status={_label(status): count for status, count in db.exec(by_status_stmt).all()},
        by_type={_label(type_): count for type_, count in db.exec(by_type_stmt).all()},
        recent=[RecentInquiry.model_validate(i) for i in db.exec(recent_stmt).all()],
    )
