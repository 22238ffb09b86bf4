from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime
from brandsbridge.models.user import UserRole
from .common import CamelModel


class UserResponse(CamelModel):
    id: int
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: UserRole
    is_active: bool
    created_at: datetime


class UserCreate(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: UserRole = UserRole.EDITOR
    is_active: bool = True


class UserUpdate(CamelModel):
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6)


class AuthResponse(CamelModel):
    user: UserResponse
    access_token: str
