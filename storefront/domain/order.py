"""
Order Entity

Customer order as held by the Apper backend (`order_c`). Attributes use
plain names; each one is aliased to its `_c` wire column, and either
spelling is accepted on input.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .order_status import OrderStatus

ORDER_ENTITY = "order_c"

ORDER_FIELDS: tuple[str, ...] = (
    "items_c",
    "total_c",
    "delivery_address_c",
    "payment_method_c",
    "status_c",
    "order_date_c",
    "estimated_delivery_c",
)

# Days between order creation and estimated delivery
ESTIMATED_DELIVERY_DAYS = 5


class Order(BaseModel):
    """
    Decoded order record.

    `items` and `delivery_address` are always structures here, never the
    JSON text stored on the wire. Backend system fields (Name, CreatedOn...)
    are kept as extras.
    """

    id: int | None = Field(None, alias="Id")
    items: list[dict[str, Any]] = Field(default_factory=list, alias="items_c")
    total: int | float | None = Field(None, alias="total_c")
    delivery_address: dict[str, Any] = Field(default_factory=dict, alias="delivery_address_c")
    payment_method: str | None = Field(None, alias="payment_method_c")
    status: str | None = Field(None, alias="status_c")
    order_date: str | None = Field(None, alias="order_date_c")
    estimated_delivery: str | None = Field(None, alias="estimated_delivery_c")

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @property
    def order_status(self) -> OrderStatus | None:
        """Status as an OrderStatus, or None when the backend sent an unknown value."""
        if not self.status:
            return None
        try:
            return OrderStatus.from_string(self.status)
        except ValueError:
            return None

    def preview_items(self, limit: int = 2) -> tuple[list[dict[str, Any]], int]:
        """
        First `limit` line items plus how many were left out.

        Returns:
            (items shown, number of remaining items)
        """
        return self.items[:limit], max(len(self.items) - limit, 0)

    def to_record(self) -> dict[str, Any]:
        """Client-facing dict keyed by wire names, with decoded values."""
        return self.model_dump(by_alias=True)


class OrderDraft(BaseModel):
    """Input for creating an order. Missing fields get create-time defaults."""

    items: list[dict[str, Any]] | str | None = Field(None, alias="items_c")
    total: int | float | None = Field(None, alias="total_c")
    delivery_address: dict[str, Any] | str | None = Field(None, alias="delivery_address_c")
    payment_method: str | None = Field(None, alias="payment_method_c")
    status: OrderStatus | str | None = Field(None, alias="status_c")

    model_config = ConfigDict(populate_by_name=True, extra="ignore", use_enum_values=True)


class OrderPatch(BaseModel):
    """
    Partial update of an order.

    None means "leave unchanged". Numeric fields are sent even when 0;
    text fields only when non-empty.
    """

    items: list[dict[str, Any]] | str | None = Field(None, alias="items_c")
    total: int | float | None = Field(None, alias="total_c")
    delivery_address: dict[str, Any] | str | None = Field(None, alias="delivery_address_c")
    payment_method: str | None = Field(None, alias="payment_method_c")
    status: OrderStatus | str | None = Field(None, alias="status_c")
    order_date: str | None = Field(None, alias="order_date_c")
    estimated_delivery: str | None = Field(None, alias="estimated_delivery_c")

    model_config = ConfigDict(populate_by_name=True, extra="ignore", use_enum_values=True)
