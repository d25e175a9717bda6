"""
Storefront Records

Data-access layer for a storefront backed by the Apper records API:
query construction, record normalization and CRUD façades for orders,
products and categories.

Usage:
    from storefront import build_services

    services = build_services()
    orders = await services.orders.get_order_history()
    await services.close()
"""

from storefront.container import StorefrontServices, build_services, create_apper_client
from storefront.domain import Category, Order, OrderDraft, OrderPatch, OrderStatus, Product, ProductDraft, ProductPatch
from storefront.services import CategoryService, OrderService, ProductService, sort_orders_by_date

__version__ = "0.1.0"

__all__ = [
    "build_services",
    "create_apper_client",
    "StorefrontServices",
    "OrderService",
    "ProductService",
    "CategoryService",
    "sort_orders_by_date",
    "Order",
    "OrderDraft",
    "OrderPatch",
    "OrderStatus",
    "Product",
    "ProductDraft",
    "ProductPatch",
    "Category",
]
