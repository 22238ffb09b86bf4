from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional


class CamelModel(BaseModel):
    """Base for API payloads: camelCase on the wire, snake_case in Python."""

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class PageMeta(CamelModel):
    total: int
    page: int
    limit: int
    total_pages: int


class MessageResponse(BaseModel):
    message: str


class CategorySummary(CamelModel):
    id: int
    name: str
    name_ar: Optional[str] = None
    slug: str


class BrandSummary(CamelModel):
    id: int
    name: str
    name_ar: Optional[str] = None
    slug: str
    logo: Optional[str] = None
