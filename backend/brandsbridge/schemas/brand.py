from pydantic import Field
from typing import Optional, List
from datetime import datetime
from .common import CamelModel
from .product import ProductResponse


class BrandResponse(CamelModel):
    id: int
    name: str
    name_ar: Optional[str] = None
    slug: str
    description: Optional[str] = None
    logo: Optional[str] = None
    website: Optional[str] = None
    country: Optional[str] = None
    is_featured: bool
    is_active: bool
    sort_order: int
    created_at: datetime
    updated_at: datetime
    product_count: Optional[int] = None


class BrandDetailResponse(BrandResponse):
    products: List[ProductResponse] = []


class BrandCreate(CamelModel):
    name: str = Field(min_length=1)
    name_ar: Optional[str] = None
    slug: str = Field(min_length=1)
    description: Optional[str] = None
    logo: Optional[str] = None
    website: Optional[str] = None
    country: Optional[str] = None
    is_featured: bool = False
    is_active: bool = True
    sort_order: int = Field(default=0, ge=0)


class BrandUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    name_ar: Optional[str] = None
    slug: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    logo: Optional[str] = None
    website: Optional[str] = None
    country: Optional[str] = None
    is_featured: Optional[bool] = None
    is_active: Optional[bool] = None
    sort_order: Optional[int] = Field(default=None, ge=0)
