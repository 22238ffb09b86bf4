from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from typing import Dict, List, Optional
from brandsbridge.api.deps import get_db, staff_required
from brandsbridge.models.content import PartnerType
from brandsbridge.models.user import User
from brandsbridge.schemas.common import MessageResponse
from brandsbridge.schemas.content import (
    ContentResponse, ContentEntry, ContentCreate, ContentUpdate,
    SettingResponse, SettingUpdate,
    StatisticResponse, CompanyValueResponse, ServiceResponse, PartnerResponse,
)
from brandsbridge.services import content as content_service

router = APIRouter(prefix="/api/content", tags=["content"])


# === Public ===

@router.get("/public", response_model=Dict[str, ContentEntry])
def get_public_content(db: Session = Depends(get_db)):
    """Весь контент сайта в виде словаря key -> {value, valueAr, type}"""
    return content_service.get_public_content(db)


@router.get("/settings", response_model=Dict[str, str])
def get_settings(
    group: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    return content_service.get_settings(db, group)


@router.get("/statistics", response_model=List[StatisticResponse])
def list_statistics(db: Session = Depends(get_db)):
    return content_service.list_statistics(db)


@router.get("/values", response_model=List[CompanyValueResponse])
def list_values(db: Session = Depends(get_db)):
    return content_service.list_values(db)


@router.get("/services", response_model=List[ServiceResponse])
def list_services(db: Session = Depends(get_db)):
    return content_service.list_services(db)


@router.get("/partners", response_model=List[PartnerResponse])
def list_partners(
    type: Optional[PartnerType] = Query(None),
    db: Session = Depends(get_db)
):
    return content_service.list_partners(db, type)


# === Admin ===

@router.get("", response_model=List[ContentResponse])
def list_content(
    section: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return content_service.list_content(db, section)


@router.get("/key/{key}", response_model=ContentResponse)
def get_content(
    key: str,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return content_service.get_content(db, key)


@router.post("", response_model=ContentResponse, status_code=201)
def create_content(
    data: ContentCreate,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return content_service.create_content(db, data)


@router.patch("/key/{key}", response_model=ContentResponse)
def update_content(
    key: str,
    data: ContentUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return content_service.update_content(db, key, data)


@router.patch("/settings/{key}", response_model=SettingResponse)
def update_setting(
    key: str,
    data: SettingUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return content_service.update_setting(db, key, data.value)


@router.delete("/key/{key}", response_model=MessageResponse)
def delete_content(
    key: str,
    db: Session = Depends(get_db),
    _: User = Depends(staff_required)
):
    return content_service.delete_content(db, key)
