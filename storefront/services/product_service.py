"""
Product Service

CRUD façade for `product_c` records: listing, filtering by category,
free-text search and brand discovery.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from storefront.domain.product import PRODUCT_ENTITY, PRODUCT_FIELDS, Product, ProductDraft, ProductPatch
from storefront.records.normalizer import decode_product, encode_product_create, encode_product_update
from storefront.records.queries import build_filter_query, build_list_query, build_search_query

from .base import RecordService, coerce_input

logger = logging.getLogger(__name__)


class ProductService(RecordService[Product]):
    """Product façade."""

    entity = PRODUCT_ENTITY
    fields = PRODUCT_FIELDS

    def decode(self, raw: Mapping[str, Any]) -> Product:
        return decode_product(raw)

    async def get_products(self) -> list[Product]:
        """Get all products."""
        return await self._list(build_list_query(self.entity, self.fields), "fetching products")

    async def get_product_by_id(self, product_id: int | str) -> Product | None:
        return await self._get(product_id, "fetching product by id")

    async def get_products_by_category(self, category_name: str) -> list[Product]:
        """Get products whose category_c equals `category_name`."""
        query = build_filter_query(self.entity, self.fields, "category_c", category_name)
        return await self._list(query, "fetching products by category")

    async def search_products(self, query: str) -> list[Product]:
        """
        Search products by name, description, category or brand.

        A product matches when any of the four fields contains `query`.
        """
        search = build_search_query(self.entity, self.fields, query)
        return await self._list(search, "searching products")

    async def get_brands(self) -> list[str]:
        """
        Distinct brand names across all products, sorted.

        Brands are not stored on their own; they are derived from a full
        product fetch. Empty and missing brands are dropped.
        """
        try:
            products = await self.get_products()
            return sorted({product.brand for product in products if product.brand})
        except Exception as e:
            logger.error(f"Error fetching brands: {e}", exc_info=True)
            return []

    async def create_product(self, product_data: BaseModel | Mapping[str, Any]) -> Product | None:
        """
        Create a product.

        Missing text fields default to "", numbers to 0, in_stock to True,
        images to "" and specifications to "{}".
        """

        def build_payload() -> dict[str, Any]:
            return encode_product_create(coerce_input(ProductDraft, product_data))

        return await self._create(build_payload, "creating product")

    async def update_product(
        self, product_id: int | str, updates: BaseModel | Mapping[str, Any]
    ) -> Product | None:
        """Partially update a product. Only supplied fields are sent."""

        def build_payload(record_id: int) -> dict[str, Any]:
            return encode_product_update(record_id, coerce_input(ProductPatch, updates))

        return await self._update(product_id, build_payload, "updating product")

    async def delete_product(self, product_id: int | str) -> bool:
        return await self._delete(product_id, "deleting product")
