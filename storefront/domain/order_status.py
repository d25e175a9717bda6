"""
Order Status Value Object

Lifecycle states an order can report. The backend stores the plain value
in `status_c`; nothing here enforces transitions, that is the backend's job.
"""

from enum import Enum
from typing import Self


class OrderStatus(str, Enum):
    """
    Order lifecycle states.

    New orders are created as CONFIRMED; the remaining states are set by
    fulfilment on the backend side.
    """

    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Create from string value (case-insensitive)."""
        for member in cls:
            if member.value.lower() == value.lower():
                return member
        raise ValueError(f"Invalid {cls.__name__}: {value}")

    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    def is_active(self) -> bool:
        """Check if order is still in progress."""
        return not self.is_terminal()


DEFAULT_ORDER_STATUS = OrderStatus.CONFIRMED
