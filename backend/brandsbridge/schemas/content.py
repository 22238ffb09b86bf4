from pydantic import Field
from typing import Optional
from datetime import datetime
from brandsbridge.models.content import ContentType, PartnerType
from .common import CamelModel


class ContentResponse(CamelModel):
    id: int
    key: str
    type: ContentType
    value: str
    value_ar: Optional[str] = None
    section: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ContentEntry(CamelModel):
    """Value of one key in the public content map."""
    value: str
    value_ar: Optional[str] = None
    type: ContentType


class ContentCreate(CamelModel):
    key: str = Field(min_length=1)
    type: ContentType = ContentType.TEXT
    value: str = Field(min_length=1)
    value_ar: Optional[str] = None
    section: Optional[str] = None


class ContentUpdate(CamelModel):
    type: Optional[ContentType] = None
    value: Optional[str] = None
    value_ar: Optional[str] = None
    section: Optional[str] = None


class SettingResponse(CamelModel):
    id: int
    key: str
    value: str
    type: str
    group: str
    updated_at: datetime


class SettingUpdate(CamelModel):
    value: str


class StatisticResponse(CamelModel):
    id: int
    key: str
    label: str
    label_ar: Optional[str] = None
    value: str
    icon: Optional[str] = None
    sort_order: int
    is_active: bool


class CompanyValueResponse(CamelModel):
    id: int
    title: str
    title_ar: Optional[str] = None
    description: str
    description_ar: Optional[str] = None
    icon: Optional[str] = None
    sort_order: int
    is_active: bool


class ServiceResponse(CompanyValueResponse):
    image: Optional[str] = None


class PartnerResponse(CamelModel):
    id: int
    name: str
    logo: str
    website: Optional[str] = None
    type: PartnerType
    sort_order: int
    is_active: bool
