from pydantic import EmailStr, Field
from typing import Optional, List, Dict
from datetime import datetime
from brandsbridge.models.inquiry import InquiryType, InquiryStatus
from .common import CamelModel, PageMeta


class InquiryCreate(CamelModel):
    type: InquiryType = InquiryType.GENERAL
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    company: Optional[str] = None
    country: Optional[str] = None
    subject: Optional[str] = None
    message: str = Field(min_length=1)


class InquiryResponse(CamelModel):
    id: int
    type: InquiryType
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    company: Optional[str] = None
    country: Optional[str] = None
    subject: Optional[str] = None
    message: str
    status: InquiryStatus
    notes: Optional[str] = None
    responded_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class InquiryListResponse(CamelModel):
    data: List[InquiryResponse]
    meta: PageMeta


class InquiryFilter(CamelModel):
    search: Optional[str] = None
    type: Optional[InquiryType] = None
    status: Optional[InquiryStatus] = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)


class InquiryUpdate(CamelModel):
    status: Optional[InquiryStatus] = None
    notes: Optional[str] = None


class InquiryStatusUpdate(CamelModel):
    status: InquiryStatus


class InquiryNotesUpdate(CamelModel):
    notes: str


class RecentInquiry(CamelModel):
    """Reduced projection for the dashboard: no message, notes or phone."""
    id: int
    first_name: str
    last_name: str
    email: str
    type: InquiryType
    status: InquiryStatus
    created_at: datetime


class InquiryStatsResponse(CamelModel):
    total: int
    by_status: Dict[str, int]
    by_type: Dict[str, int]
    recent: List[RecentInquiry]
