from .user import User, UserRole
from .category import Category
from .brand import Brand
from .product import Product
from .inquiry import Inquiry, InquiryType, InquiryStatus
from .content import (
    Content, ContentType,
    Setting, Statistic, CompanyValue, Service,
    Partner, PartnerType,
)

__all__ = [
    "User", "UserRole",
    "Category",
    "Brand",
    "Product",
    "Inquiry", "InquiryType", "InquiryStatus",
    "Content", "ContentType",
    "Setting", "Statistic", "CompanyValue", "Service",
    "Partner", "PartnerType",
]
