from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, JSON
from typing import Optional, List, Dict, TYPE_CHECKING
from datetime import datetime
from .base import utcnow

if TYPE_CHECKING:
    from .category import Category
    from .brand import Brand


class Product(SQLModel, table=True):
    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    name_ar: Optional[str] = None
    slug: str = Field(unique=True, index=True)
    description: Optional[str] = None
    short_description: Optional[str] = None
    sku: Optional[str] = Field(default=None, unique=True)

    image: Optional[str] = None
    images: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    specifications: Dict[str, str] = Field(default_factory=dict, sa_column=Column(JSON))

    category_id: Optional[int] = Field(default=None, foreign_key="categories.id", index=True)
    brand_id: Optional[int] = Field(default=None, foreign_key="brands.id", index=True)

    is_featured: bool = Field(default=False)
    is_active: bool = Field(default=True)
    sort_order: int = Field(default=0)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    # Relationships
    category: Optional["Category"] = Relationship(back_populates="products")
    brand: Optional["Brand"] = Relationship(back_populates="products")
