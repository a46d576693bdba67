"""
Pydantic schemas for the orders API.

Request schemas carry types only; order rules (customer reference,
non-empty items, positive quantities and prices) are enforced by the
order validator.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from onlinestore.domain.orders.entities import Order, OrderItem, OrderStatus


class OrderItemSchema(BaseModel):
    """A product line in an order."""

    product_id: Optional[UUID] = None
    quantity: Optional[int] = 0
    price: Optional[Decimal] = Decimal("0")


class OrderRequest(BaseModel):
    """Request body for creating or updating an order.

    Attributes:
        customer_id: Customer placing the order.
        order_date_time: When the order was placed. Defaults to now (UTC).
        status: Lifecycle state. Defaults to pending.
        items: Product lines.
    """

    customer_id: Optional[UUID] = None
    order_date_time: Optional[datetime] = None
    status: OrderStatus = OrderStatus.PENDING
    items: list[OrderItemSchema] = Field(default_factory=list)

    def to_entity(self) -> Order:
        return Order(
            customer_id=self.customer_id,
            order_date_time=self.order_date_time or datetime.now(timezone.utc),
            status=self.status,
            items=tuple(
                OrderItem(
                    product_id=item.product_id,
                    quantity=item.quantity,
                    price=item.price,
                )
                for item in self.items
            ),
        )


class OrderItemResponse(BaseModel):
    product_id: UUID
    quantity: int
    price: Decimal


class OrderResponse(BaseModel):
    """A stored order, with its computed total."""

    id: UUID
    customer_id: UUID
    order_date_time: datetime
    status: OrderStatus
    items: list[OrderItemResponse]
    total: Decimal

    @classmethod
    def from_entity(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            customer_id=order.customer_id,
            order_date_time=order.order_date_time,
            status=order.status,
            items=[
                OrderItemResponse(
                    product_id=item.product_id,
                    quantity=item.quantity,
                    price=item.price,
                )
                for item in order.items
            ],
            total=order.total,
        )
