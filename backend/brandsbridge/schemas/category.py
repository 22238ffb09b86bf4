from pydantic import Field
from typing import Optional, List
from datetime import datetime
from .common import CamelModel
from .product import ProductResponse


class CategoryResponse(CamelModel):
    id: int
    name: str
    name_ar: Optional[str] = None
    slug: str
    description: Optional[str] = None
    image: Optional[str] = None
    icon: Optional[str] = None
    sort_order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime
    product_count: Optional[int] = None


class CategoryDetailResponse(CategoryResponse):
    products: List[ProductResponse] = []


class CategoryCreate(CamelModel):
    name: str = Field(min_length=1)
    name_ar: Optional[str] = None
    slug: str = Field(min_length=1)
    description: Optional[str] = None
    image: Optional[str] = None
    icon: Optional[str] = None
    sort_order: int = Field(default=0, ge=0)
    is_active: bool = True


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    name_ar: Optional[str] = None
    slug: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    image: Optional[str] = None
    icon: Optional[str] = None
    sort_order: Optional[int] = Field(default=None, ge=0)
    is_active: Optional[bool] = None
