"""
Adapter: Order store.

Implements the EntityRepository port for orders. Starts empty.
"""

from onlinestore.domain.orders.entities import Order
from onlinestore.infrastructure.in_memory_repository import InMemoryRepository


class InMemoryOrderRepository(InMemoryRepository[Order]):
    """In-memory order store."""
