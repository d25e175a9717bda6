"""
Product Entity

Catalog product as held by the Apper backend (`product_c`).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

PRODUCT_ENTITY = "product_c"

PRODUCT_FIELDS: tuple[str, ...] = (
    "name_c",
    "description_c",
    "price_c",
    "original_price_c",
    "category_c",
    "subcategory_c",
    "images_c",
    "rating_c",
    "review_count_c",
    "in_stock_c",
    "specifications_c",
    "brand_c",
)


class Product(BaseModel):
    """
    Decoded product record.

    `images` is a list of URLs (never containing empty entries) and
    `specifications` a key-value mapping.
    """

    id: int | None = Field(None, alias="Id")
    name: str | None = Field(None, alias="name_c")
    description: str | None = Field(None, alias="description_c")
    price: int | float | None = Field(None, alias="price_c")
    original_price: int | float | None = Field(None, alias="original_price_c")
    category: str | None = Field(None, alias="category_c")
    subcategory: str | None = Field(None, alias="subcategory_c")
    images: list[str] = Field(default_factory=list, alias="images_c")
    rating: int | float | None = Field(None, alias="rating_c")
    review_count: int | None = Field(None, alias="review_count_c")
    in_stock: bool | None = Field(None, alias="in_stock_c")
    specifications: dict[str, Any] = Field(default_factory=dict, alias="specifications_c")
    brand: str | None = Field(None, alias="brand_c")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @property
    def discount_percentage(self) -> int:
        """Whole-percent discount of price against original price (0 if none)."""
        if not self.original_price or not self.price or self.original_price <= self.price:
            return 0
        return round((self.original_price - self.price) / self.original_price * 100)

    @property
    def primary_image(self) -> str | None:
        return self.images[0] if self.images else None

    def to_record(self) -> dict[str, Any]:
        """Client-facing dict keyed by wire names, with decoded values."""
        return self.model_dump(by_alias=True)


class ProductDraft(BaseModel):
    """Input for creating a product. Missing fields get create-time defaults."""

    name: str | None = Field(None, alias="name_c")
    description: str | None = Field(None, alias="description_c")
    price: int | float | None = Field(None, alias="price_c")
    original_price: int | float | None = Field(None, alias="original_price_c")
    category: str | None = Field(None, alias="category_c")
    subcategory: str | None = Field(None, alias="subcategory_c")
    images: list[str] | str | None = Field(None, alias="images_c")
    rating: int | float | None = Field(None, alias="rating_c")
    review_count: int | None = Field(None, alias="review_count_c")
    in_stock: bool | None = Field(None, alias="in_stock_c")
    specifications: dict[str, Any] | str | None = Field(None, alias="specifications_c")
    brand: str | None = Field(None, alias="brand_c")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ProductPatch(ProductDraft):
    """
    Partial update of a product.

    Same fields as ProductDraft; None means "leave unchanged".
    """
