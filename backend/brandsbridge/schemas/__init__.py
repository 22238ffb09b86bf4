from .common import PageMeta, MessageResponse
from .category import CategoryResponse, CategoryDetailResponse
from .brand import BrandResponse, BrandDetailResponse
from .product import ProductResponse, ProductListResponse, ProductFilter
from .inquiry import InquiryResponse, InquiryListResponse, InquiryFilter, InquiryStatsResponse

__all__ = [
    "PageMeta", "MessageResponse",
    "CategoryResponse", "CategoryDetailResponse",
    "BrandResponse", "BrandDetailResponse",
    "ProductResponse", "ProductListResponse", "ProductFilter",
    "InquiryResponse", "InquiryListResponse", "InquiryFilter", "InquiryStatsResponse",
]
