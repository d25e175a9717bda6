"""
Order Service

CRUD façade for `order_c` records plus the order-history and active-order listings.
"""

from collections.abc import Callable, Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel

from storefront.domain.order import ORDER_ENTITY, ORDER_FIELDS, Order, OrderDraft, OrderPatch
from storefront.domain.order_status import OrderStatus
from storefront.records.codecs import parse_timestamp
from storefront.records.normalizer import decode_order, encode_order_create, encode_order_update
from storefront.records.queries import build_filter_query, build_list_query

from .base import RecordService, coerce_input
from .ports import IRecordClient


def _utc_now() -> datetime:
    return datetime.now(UTC)


def sort_orders_by_date(orders: Iterable[Order], newest_first: bool = True) -> list[Order]:
    """
    Sort orders by `order_date`.

    Orders whose date is missing or unparseable always go last, in their
    original relative order.
    """
    dated: list[tuple[datetime, Order]] = []
    undated: list[Order] = []
    for order in orders:
        moment = parse_timestamp(order.order_date)
        if moment is None:
            undated.append(order)
        else:
            dated.append((moment, order))

    dated.sort(key=lambda pair: pair[0], reverse=newest_first)
    return [order for _, order in dated] + undated


class OrderService(RecordService[Order]):
    """
    Order façade.

    Example:
        ```python
        service = OrderService(client)
        order = await service.create_order({"items_c": [{"name": "Lamp", "quantity": 1}], "total_c": 40})
        await service.update_order(order.id, {"status_c": "shipped"})
        ```
    """

    entity = ORDER_ENTITY
    fields = ORDER_FIELDS

    def __init__(self, client: IRecordClient | None, clock: Callable[[], datetime] = _utc_now):
        """
        Initialize order service.

        Args:
            client: Records backend client
            clock: Source of "now" used to stamp new orders
        """
        super().__init__(client)
        self.clock = clock

    def decode(self, raw: Mapping[str, Any]) -> Order:
        return decode_order(raw)

    async def get_orders(self) -> list[Order]:
        """Get all orders."""
        return await self._list(build_list_query(self.entity, self.fields), "fetching orders")

    async def get_order_by_id(self, order_id: int | str) -> Order | None:
        """Get one order, or None when it does not exist."""
        return await self._get(order_id, "fetching order by id")

    async def get_orders_by_status(self, status: OrderStatus | str) -> list[Order]:
        """Get orders whose status_c equals `status`."""
        value = status.value if isinstance(status, OrderStatus) else status
        query = build_filter_query(self.entity, self.fields, "status_c", value)
        return await self._list(query, "fetching orders by status")

    async def get_order_history(self) -> list[Order]:
        """All orders, newest first."""
        return sort_orders_by_date(await self.get_orders())

    async def get_active_orders(self) -> list[Order]:
        """
        Orders still in progress (not delivered or cancelled), newest first.

        Orders with an unknown status are left out.
        """
        orders = await self.get_orders()
        return sort_orders_by_date(
            order for order in orders if order.order_status is not None and order.order_status.is_active()
        )

    async def create_order(self, order_data: BaseModel | Mapping[str, Any]) -> Order | None:
        """
        Create an order.

        The order date is stamped with the current time and the estimated
        delivery five days later; status defaults to "confirmed".

        Args:
            order_data: OrderDraft or a mapping using wire or attribute names

        Returns:
            The created order as echoed by the backend, or None on failure
        """

        def build_payload() -> dict[str, Any]:
            return encode_order_create(coerce_input(OrderDraft, order_data), self.clock())

        return await self._create(build_payload, "creating order")

    async def update_order(self, order_id: int | str, updates: BaseModel | Mapping[str, Any]) -> Order | None:
        """
        Partially update an order. Only supplied fields are sent.

        Returns:
            The updated order, or None on failure
        """

        def build_payload(record_id: int) -> dict[str, Any]:
            return encode_order_update(record_id, coerce_input(OrderPatch, updates))

        return await self._update(order_id, build_payload, "updating order")

    async def delete_order(self, order_id: int | str) -> bool:
        """Delete an order; True only when the backend confirms it."""
        return await self._delete(order_id, "deleting order")
