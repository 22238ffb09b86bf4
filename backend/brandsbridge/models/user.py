from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum
from .base import utcnow


class UserRole(str, Enum):
    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    EDITOR = "EDITOR"


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True)
    password_hash: str

    first_name: Optional[str] = None
    last_name: Optional[str] = None

    role: UserRole = Field(default=UserRole.EDITOR)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
