"""
Domain entities for the payments bounded context.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID

PAYMENT_ENTITY = "Payment"


class PaymentStatus(Enum):
    """Processing state of a payment."""

    PENDING = 0  # initiated but not processed
    PROCESSING = 1
    COMPLETED = 2
    FAILED = 3
    REFUNDED = 4
    CANCELLED = 5


class PaymentMethod(Enum):
    """Instrument used to pay."""

    CREDIT_CARD = 0
    DEBIT_CARD = 1
    PAYPAL = 2
    BANK_TRANSFER = 3
    CRYPTOCURRENCY = 4


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Payment:
    """A payment settling an order.

    Attributes:
        id: Server-assigned identifier; None until stored.
        order_id: Order being paid.
        amount: Amount charged, strictly positive.
        status: Processing state.
        method: Payment instrument.
        payment_date: When the payment was made.
        tx_id: Optional external transaction reference.
    """

    order_id: Optional[UUID] = None
    amount: Decimal = Decimal("0")
    status: PaymentStatus = PaymentStatus.PENDING
    method: PaymentMethod = PaymentMethod.CREDIT_CARD
    payment_date: datetime = field(default_factory=_utcnow)
    tx_id: Optional[str] = None
    id: Optional[UUID] = None
