from pydantic import Field, field_validator
from typing import Optional, List, Dict
from datetime import datetime
from .common import CamelModel, PageMeta, CategorySummary, BrandSummary


class ProductResponse(CamelModel):
    id: int
    name: str
    name_ar: Optional[str] = None
    slug: str
    description: Optional[str] = None
    short_description: Optional[str] = None
    sku: Optional[str] = None

    image: Optional[str] = None
    images: List[str] = []
    specifications: Dict[str, str] = {}

    is_featured: bool
    is_active: bool
    sort_order: int

    category_id: Optional[int] = None
    brand_id: Optional[int] = None
    category: Optional[CategorySummary] = None
    brand: Optional[BrandSummary] = None

    created_at: datetime
    updated_at: datetime


class ProductListResponse(CamelModel):
    """Пагинированный список"""
    data: List[ProductResponse]
    meta: PageMeta


class ProductFilter(CamelModel):
    """Optional-field filter for the product listing; an absent field means no constraint."""
    search: Optional[str] = None
    category_id: Optional[int] = None
    brand_id: Optional[int] = None
    featured: Optional[bool] = None
    include_inactive: bool = False
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)


def _normalize_sku(value: Optional[str]) -> Optional[str]:
    # Admin forms post "" for an empty SKU
    if value is None:
        return None
    return value.strip() or None


class ProductCreate(CamelModel):
    name: str = Field(min_length=1)
    name_ar: Optional[str] = None
    slug: str = Field(min_length=1)
    description: Optional[str] = None
    short_description: Optional[str] = None
    sku: Optional[str] = None
    image: Optional[str] = None
    images: List[str] = []
    specifications: Dict[str, str] = {}
    is_featured: bool = False
    is_active: bool = True
    sort_order: int = Field(default=0, ge=0)
    category_id: Optional[int] = None
    brand_id: Optional[int] = None

    @field_validator("sku")
    @classmethod
    def blank_sku_to_none(cls, v: Optional[str]) -> Optional[str]:
        return _normalize_sku(v)


class ProductUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    name_ar: Optional[str] = None
    slug: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    short_description: Optional[str] = None
    sku: Optional[str] = None
    image: Optional[str] = None
    images: Optional[List[str]] = None
    specifications: Optional[Dict[str, str]] = None
    is_featured: Optional[bool] = None
    is_active: Optional[bool] = None
    sort_order: Optional[int] = Field(default=None, ge=0)
    category_id: Optional[int] = None
    brand_id: Optional[int] = None

    @field_validator("sku")
    @classmethod
    def blank_sku_to_none(cls, v: Optional[str]) -> Optional[str]:
        return _normalize_sku(v)


class GroupCount(CamelModel):
    id: int
    name: str
    count: int


class ProductStatsResponse(CamelModel):
    total: int
    active: int
    featured: int
    by_category: List[GroupCount]
    by_brand: List[GroupCount]
