"""
Storefront façades: one service per backend entity.
"""

from .base import RecordService
from .category_service import CategoryService
from .order_service import OrderService, sort_orders_by_date
from .ports import IRecordClient
from .product_service import ProductService

__all__ = [
    "IRecordClient",
    "RecordService",
    "OrderService",
    "ProductService",
    "CategoryService",
    "sort_orders_by_date",
]
