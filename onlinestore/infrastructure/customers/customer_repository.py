"""
Adapter: Customer store.

Implements the EntityRepository port for customers.
Optionally preloads the sample customers.
"""

from uuid import UUID

from onlinestore.domain.customers.entities import Customer
from onlinestore.infrastructure.in_memory_repository import InMemoryRepository

SAMPLE_CUSTOMERS = (
    Customer(
        id=UUID("bafda49f-f76a-4328-8c2f-c637d6e74e85"),
        name="John Doe",
        email="john.doe@example.com",
        address="456 Elm St, Anytown, USA",
    ),
    Customer(
        id=UUID("ba4adcc3-adfc-443d-b760-01c5051dc4f1"),
        name="Jane Smith",
        email="jane.smith@example.com",
        address="123 Main St, Anytown, USA",
    ),
    Customer(
        id=UUID("f5fba9a0-0745-4028-93f1-9053f5031b10"),
        name="Alice Johnson",
        email="alice.johnson@example.com",
        address="789 Oak St, Anytown, USA",
    ),
)


class InMemoryCustomerRepository(InMemoryRepository[Customer]):
    """In-memory customer store."""

    def __init__(self, seed_sample_data: bool = False) -> None:
        super().__init__(SAMPLE_CUSTOMERS if seed_sample_data else ())
