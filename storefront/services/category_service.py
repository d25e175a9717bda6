"""
Category Service

Read-only façade for `category_c` records.
"""

from collections.abc import Mapping
from typing import Any

from storefront.domain.category import CATEGORY_ENTITY, CATEGORY_FIELDS, Category
from storefront.records.normalizer import decode_category
from storefront.records.queries import build_list_query

from .base import RecordService


class CategoryService(RecordService[Category]):
    entity = CATEGORY_ENTITY
    fields = CATEGORY_FIELDS

    def decode(self, raw: Mapping[str, Any]) -> Category:
        return decode_category(raw)

    async def get_categories(self) -> list[Category]:
        return await self._list(build_list_query(self.entity, self.fields), "fetching categories")

    async def get_category_by_id(self, category_id: int | str) -> Category | None:
        return await self._get(category_id, "fetching category by id")
