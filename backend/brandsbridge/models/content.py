from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum
from .base import utcnow


class ContentType(str, Enum):
    TEXT = "TEXT"
    HTML = "HTML"
    IMAGE = "IMAGE"
    JSON = "JSON"


class PartnerType(str, Enum):
    DISTRIBUTOR = "DISTRIBUTOR"
    PARTNER = "PARTNER"
    CERTIFICATION = "CERTIFICATION"


class Content(SQLModel, table=True):
    """Editable site copy addressed by a unique key."""
    __tablename__ = "contents"

    id: Optional[int] = Field(default=None, primary_key=True)
    key: str = Field(unique=True, index=True)
    type: ContentType = Field(default=ContentType.TEXT)
    value: str
    value_ar: Optional[str] = None
    section: Optional[str] = Field(default=None, index=True)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Setting(SQLModel, table=True):
    __tablename__ = "settings"

    id: Optional[int] = Field(default=None, primary_key=True)
    key: str = Field(unique=True, index=True)
    value: str
    type: str = Field(default="string")
    group: str = Field(default="general", index=True)

    updated_at: datetime = Field(default_factory=utcnow)


class Statistic(SQLModel, table=True):
    __tablename__ = "statistics"

    id: Optional[int] = Field(default=None, primary_key=True)
    key: str = Field(unique=True, index=True)
    label: str
    label_ar: Optional[str] = None
    value: str
    icon: Optional[str] = None
    sort_order: int = Field(default=0)
    is_active: bool = Field(default=True)


class CompanyValue(SQLModel, table=True):
    __tablename__ = "company_values"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(unique=True)
    title_ar: Optional[str] = None
    description: str
    description_ar: Optional[str] = None
    icon: Optional[str] = None
    sort_order: int = Field(default=0)
    is_active: bool = Field(default=True)


class Service(SQLModel, table=True):
    __tablename__ = "services"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(unique=True)
    title_ar: Optional[str] = None
    description: str
    description_ar: Optional[str] = None
    icon: Optional[str] = None
    image: Optional[str] = None
    sort_order: int = Field(default=0)
    is_active: bool = Field(default=True)


class Partner(SQLModel, table=True):
    __tablename__ = "partners"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True)
    logo: str
    website: Optional[str] = None
    type: PartnerType = Field(default=PartnerType.PARTNER)
    sort_order: int = Field(default=0)
    is_active: bool = Field(default=True)
