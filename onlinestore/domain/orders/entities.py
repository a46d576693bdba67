"""
Domain entities for the orders bounded context.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID

ORDER_ENTITY = "Order"


class OrderStatus(Enum):
    """Lifecycle state of an order."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class OrderItem:
    """A product line within an order, priced at order time."""

    product_id: Optional[UUID] = None
    quantity: int = 0
    price: Decimal = Decimal("0")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Order:
    """An order placed by a customer.

    Attributes:
        id: Server-assigned identifier; None until stored.
        customer_id: Customer who placed the order.
        order_date_time: When the order was placed.
        status: Current lifecycle state.
        items: Ordered product lines.
    """

    customer_id: Optional[UUID] = None
    order_date_time: datetime = field(default_factory=_utcnow)
    status: OrderStatus = OrderStatus.PENDING
    items: tuple[OrderItem, ...] = ()
    id: Optional[UUID] = None

    @property
    def total(self) -> Decimal:
        """Sum of quantity * price over all items."""
        return sum((item.price * item.quantity for item in self.items), Decimal("0"))
