from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List, TYPE_CHECKING
from datetime import datetime
from .base import utcnow

if TYPE_CHECKING:
    from .product import Product


class Brand(SQLModel, table=True):
    __tablename__ = "brands"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    name_ar: Optional[str] = None
    slug: str = Field(unique=True, index=True)
    description: Optional[str] = None
    logo: Optional[str] = None
    website: Optional[str] = None
    country: Optional[str] = None

    is_featured: bool = Field(default=False)
    is_active: bool = Field(default=True)
    sort_order: int = Field(default=0)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    # Relationships
    products: List["Product"] = Relationship(back_populates="brand")
