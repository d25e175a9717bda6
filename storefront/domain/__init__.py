"""
Storefront domain types: tagged records for each backend entity, plus the
draft/patch inputs used to create and update them.
"""

from .category import CATEGORY_ENTITY, CATEGORY_FIELDS, Category
from .order import ORDER_ENTITY, ORDER_FIELDS, Order, OrderDraft, OrderPatch
from .order_status import OrderStatus
from .product import PRODUCT_ENTITY, PRODUCT_FIELDS, Product, ProductDraft, ProductPatch

__all__ = [
    "Order",
    "OrderDraft",
    "OrderPatch",
    "OrderStatus",
    "ORDER_ENTITY",
    "ORDER_FIELDS",
    "Product",
    "ProductDraft",
    "ProductPatch",
    "PRODUCT_ENTITY",
    "PRODUCT_FIELDS",
    "Category",
    "CATEGORY_ENTITY",
    "CATEGORY_FIELDS",
]
