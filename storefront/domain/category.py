"""
Category Entity

Catalog category (`category_c`). Read-only from the storefront.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

CATEGORY_ENTITY = "category_c"

CATEGORY_FIELDS: tuple[str, ...] = (
    "name_c",
    "subcategories_c",
    "icon_c",
)


class Category(BaseModel):
    """Decoded category record; `subcategories` never contains empty names."""

    id: int | None = Field(None, alias="Id")
    name: str | None = Field(None, alias="name_c")
    subcategories: list[str] = Field(default_factory=list, alias="subcategories_c")
    icon: str | None = Field(None, alias="icon_c")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
