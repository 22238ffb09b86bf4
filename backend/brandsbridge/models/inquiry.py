from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum
from .base import utcnow


class InquiryType(str, Enum):
    GENERAL = "GENERAL"
    BUSINESS = "BUSINESS"
    PARTNERSHIP = "PARTNERSHIP"
    SUPPORT = "SUPPORT"


class InquiryStatus(str, Enum):
    NEW = "NEW"
    IN_PROGRESS = "IN_PROGRESS"
    RESPONDED = "RESPONDED"
    CLOSED = "CLOSED"


class Inquiry(SQLModel, table=True):
    __tablename__ = "inquiries"

    id: Optional[int] = Field(default=None, primary_key=True)
    type: InquiryType = Field(default=InquiryType.GENERAL, index=True)

    # Контакты отправителя
    first_name: str
    last_name: str
    email: str = Field(index=True)
    phone: Optional[str] = None
    company: Optional[str] = None
    country: Optional[str] = None
    subject: Optional[str] = None
    message: str

    status: InquiryStatus = Field(default=InquiryStatus.NEW, index=True)
    notes: Optional[str] = None  # Только для админки
    responded_at: Optional[datetime] = None

    created_at: datetime = Field(default_factory=utcnow, index=True)
    updated_at: datetime = Field(default_factory=utcnow)
