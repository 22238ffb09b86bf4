from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from typing import Optional
from brandsbridge.api.deps import get_db, staff_required
from brandsbridge.models.inquiry import InquiryType, InquiryStatus
from brandsbridge.models.user import User
from brandsbridge.schemas.common import MessageResponse
from brandsbridge.schemas.inquiry import (
    InquiryCreate, InquiryResponse, InquiryListResponse, InquiryFilter,
    InquiryUpdate, InquiryStatusUpdate, InquiryNotesUpdate, InquiryStatsResponse,
)
from brandsbridge.services import inquiries as inquiries_service
from brandsbridge.services.query import DEFAULT_LIMIT

router = APIRouter(prefix="/api/inquiries", tags=["inquiries"])


@router.post("", response_model=InquiryResponse, status_code=201)
def create_inquiry(data: InquiryCreate, db: Session = Depends(get_db)):
    """Заявка с формы обратной связи (публично)"""
    return inquiries_service.create_inquiry(db, data)


@router.get("", response_model=InquiryListResponse)
def list_inquiries(
    search: Optional[str] = Query(None),
    type: Optional[InquiryType] = Query(None),
    status: Optional[InquiryStatus] = Query(None),
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1),
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    filters = InquiryFilter(search=search, type=type, status=status, page=page, limit=limit)
    return inquiries_service.list_inquiries(db, filters)


@router.get("/stats", response_model=InquiryStatsResponse)
def get_inquiry_stats(
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return inquiries_service.get_inquiry_stats(db)


@router.get("/{inquiry_id}", response_model=InquiryResponse)
def get_inquiry(
    inquiry_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return inquiries_service.get_inquiry(db, inquiry_id)


@router.patch("/{inquiry_id}", response_model=InquiryResponse)
def update_inquiry(
    inquiry_id: int,
    data: InquiryUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return inquiries_service.update_inquiry(db, inquiry_id, data)


@router.patch("/{inquiry_id}/status", response_model=InquiryResponse)
def update_inquiry_status(
    inquiry_id: int,
    data: InquiryStatusUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    """Смена статуса; RESPONDED проставляет respondedAt"""
    return inquiries_service.update_inquiry_status(db, inquiry_id, data.status)


@router.patch("/{inquiry_id}/notes", response_model=InquiryResponse)
def add_inquiry_note(
    inquiry_id: int,
    data: InquiryNotesUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return inquiries_service.add_inquiry_note(db, inquiry_id, data.notes)


@router.delete("/{inquiry_id}", response_model=MessageResponse)
def delete_inquiry(
    inquiry_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return inquiries_service.delete_inquiry(db, inquiry_id)
