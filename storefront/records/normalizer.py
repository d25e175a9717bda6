"""
Record Normalizer

Translates between Apper wire records and storefront entities.

decode_*: raw backend record -> Order / Product / Category
    JSON columns are parsed (absent -> [] or {}), newline columns are split
    with empty entries dropped, every other field passes through unchanged
    once it matches the declared entity type.

encode_*_create: draft -> full create payload with defaults filled in.
encode_*_update: patch -> Id plus only the fields the caller supplied.

Decoding is strict: malformed JSON raises MalformedFieldError and a value of
the wrong structure raises FieldShapeError, both DecodeError subclasses.
"""

from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from storefront.core.exceptions import FieldShapeError
from storefront.domain.category import Category
from storefront.domain.order import ESTIMATED_DELIVERY_DAYS, Order, OrderDraft, OrderPatch
from storefront.domain.order_status import DEFAULT_ORDER_STATUS
from storefront.domain.product import Product, ProductDraft, ProductPatch

from .codecs import (
    decode_json_field,
    decode_line_list,
    encode_json_field,
    encode_line_list,
    format_timestamp,
)
from .payloads import PatchPayload

ModelT = TypeVar("ModelT", bound=BaseModel)


def _validate(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or model.__name__
        raise FieldShapeError(field, first.get("type", "valid value"), first.get("msg", str(e))) from e


# ============================================================================
# Decoding
# ============================================================================


def decode_order(raw: Mapping[str, Any]) -> Order:
    """
    Decode a raw `order_c` record.

    Raises:
        MalformedFieldError: items_c / delivery_address_c is not valid JSON
        FieldShapeError: items_c is not a list of objects, or
            delivery_address_c is not an object
    """
    data = dict(raw)
    items = decode_json_field(raw, "items_c", list)
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise FieldShapeError(f"items_c[{index}]", "dict", type(item).__name__)
    data["items_c"] = items
    data["delivery_address_c"] = decode_json_field(raw, "delivery_address_c", dict)
    return _validate(Order, data)


def decode_product(raw: Mapping[str, Any]) -> Product:
    """Decode a raw `product_c` record."""
    data = dict(raw)
    data["images_c"] = decode_line_list(raw.get("images_c"))
    data["specifications_c"] = decode_json_field(raw, "specifications_c", dict)
    return _validate(Product, data)


def decode_category(raw: Mapping[str, Any]) -> Category:
    data = dict(raw)
    data["subcategories_c"] = decode_line_list(raw.get("subcategories_c"))
    return _validate(Category, data)


# ============================================================================
# Encoding
# ============================================================================


def encode_order_create(draft: OrderDraft, now: datetime) -> dict[str, Any]:
    """
    Build the create payload for an order.

    Both dates are stamped here: the order date is `now` and the estimated
    delivery is ESTIMATED_DELIVERY_DAYS later. Missing or empty items and
    address fall back to "[]" and "{}" so both columns always hold JSON.

    Args:
        draft: Order input
        now: Creation time

    Returns:
        Payload dict with every order column set
    """
    return {
        "items_c": encode_json_field(draft.items or []),
        "total_c": draft.total if draft.total is not None else 0,
        "delivery_address_c": encode_json_field(draft.delivery_address or {}),
        "payment_method_c": draft.payment_method or "",
        "status_c": draft.status or DEFAULT_ORDER_STATUS.value,
        "order_date_c": format_timestamp(now),
        "estimated_delivery_c": format_timestamp(now + timedelta(days=ESTIMATED_DELIVERY_DAYS)),
    }


def encode_order_update(order_id: int, patch: OrderPatch) -> dict[str, Any]:
    """Build a partial-update payload for an order."""
    return (
        PatchPayload(order_id)
        .json("items_c", patch.items)
        .scalar("total_c", patch.total)
        .json("delivery_address_c", patch.delivery_address)
        .text("payment_method_c", patch.payment_method)
        .text("status_c", patch.status)
        .text("order_date_c", patch.order_date)
        .text("estimated_delivery_c", patch.estimated_delivery)
        .build()
    )


def encode_product_create(draft: ProductDraft) -> dict[str, Any]:
    """
    Build the create payload for a product.

    Numeric fields default to 0 and `in_stock_c` to True; an explicit
    0 / False from the caller is kept.
    """

    def number(value: int | float | None) -> int | float:
        return value if value is not None else 0

    return {
        "name_c": draft.name or "",
        "description_c": draft.description or "",
        "price_c": number(draft.price),
        "original_price_c": number(draft.original_price),
        "category_c": draft.category or "",
        "subcategory_c": draft.subcategory or "",
        "images_c": encode_line_list(draft.images) if draft.images is not None else "",
        "rating_c": number(draft.rating),
        "review_count_c": number(draft.review_count),
        "in_stock_c": draft.in_stock if draft.in_stock is not None else True,
        "specifications_c": encode_json_field(draft.specifications) if draft.specifications else "{}",
        "brand_c": draft.brand or "",
    }


def encode_product_update(product_id: int, patch: ProductPatch) -> dict[str, Any]:
    """Build a partial-update payload for a product."""
    return (
        PatchPayload(product_id)
        .text("name_c", patch.name)
        .text("description_c", patch.description)
        .scalar("price_c", patch.price)
        .scalar("original_price_c", patch.original_price)
        .text("category_c", patch.category)
        .text("subcategory_c", patch.subcategory)
        .lines("images_c", patch.images)
        .scalar("rating_c", patch.rating)
        .scalar("review_count_c", patch.review_count)
        .scalar("in_stock_c", patch.in_stock)
        .json("specifications_c", patch.specifications)
        .text("brand_c", patch.brand)
        .build()
    )
