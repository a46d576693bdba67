"""
Adapter: Product store.

Implements the EntityRepository port for catalog products.
Optionally preloads the sample catalog.
"""

from decimal import Decimal
from uuid import UUID

from onlinestore.domain.catalog.entities import Product
from onlinestore.infrastructure.in_memory_repository import InMemoryRepository

SAMPLE_PRODUCTS = (
    Product(
        id=UUID("6dbad659-57f9-4639-b7b6-d7ef1c75321a"),
        name="Laptop",
        description="A high-performance laptop.",
        price=Decimal("999.99"),
        stock=10,
    ),
    Product(
        id=UUID("05ac7e30-a71c-4cf5-b7c1-01507aa70a31"),
        name="Smartphone",
        description="A latest model smartphone.",
        price=Decimal("699.99"),
        stock=100,
    ),
    Product(
        id=UUID("cbbb4fb6-1dbe-4e58-9fa0-f693b2c77229"),
        name="Headphones",
        description="Noise-cancelling headphones.",
        price=Decimal("199.99"),
        stock=50,
    ),
)


class InMemoryProductRepository(InMemoryRepository[Product]):
    """In-memory product store."""

    def __init__(self, seed_sample_data: bool = False) -> None:
        super().__init__(SAMPLE_PRODUCTS if seed_sample_data else ())
