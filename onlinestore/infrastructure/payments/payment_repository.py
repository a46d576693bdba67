"""
Adapter: Payment store.

Implements the EntityRepository port for payments. Starts empty.
"""

from onlinestore.domain.payments.entities import Payment
from onlinestore.infrastructure.in_memory_repository import InMemoryRepository


class InMemoryPaymentRepository(InMemoryRepository[Payment]):
    """In-memory payment store."""
