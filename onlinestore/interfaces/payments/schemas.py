"""
Pydantic schemas for the payments API.

Request schemas carry types only; payment rules are enforced by the
payment validator. Status and method are sent as their numeric codes.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from onlinestore.domain.payments.entities import Payment, PaymentMethod, PaymentStatus


class PaymentRequest(BaseModel):
    """Request body for creating or updating a payment."""

    order_id: Optional[UUID] = None
    amount: Optional[Decimal] = Decimal("0")
    status: PaymentStatus = PaymentStatus.PENDING
    method: PaymentMethod = PaymentMethod.CREDIT_CARD
    payment_date: Optional[datetime] = None
    tx_id: Optional[str] = None

    def to_entity(self) -> Payment:
        return Payment(
            order_id=self.order_id,
            amount=self.amount,
            status=self.status,
            method=self.method,
            payment_date=self.payment_date or datetime.now(timezone.utc),
            tx_id=self.tx_id,
        )


class PaymentResponse(BaseModel):
    """A stored payment."""

    id: UUID
    order_id: UUID
    amount: Decimal
    status: PaymentStatus
    method: PaymentMethod
    payment_date: datetime
    tx_id: Optional[str] = None

    @classmethod
    def from_entity(cls, payment: Payment) -> "PaymentResponse":
        return cls(
            id=payment.id,
            order_id=payment.order_id,
            amount=payment.amount,
            status=payment.status,
            method=payment.method,
            payment_date=payment.payment_date,
            tx_id=payment.tx_id,
        )
