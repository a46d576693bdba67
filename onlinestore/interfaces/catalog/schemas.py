"""
Pydantic schemas for the products API.

Request schemas carry types only; product rules are enforced by the
product validator. Values that cannot be parsed (a non-numeric price,
for example) are rejected as bad requests before validation.
"""

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from onlinestore.domain.catalog.entities import Product


class ProductRequest(BaseModel):
    """Request body for creating or updating a product."""

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = Decimal("0")
    stock: Optional[int] = 0

    def to_entity(self) -> Product:
        return Product(
            name=self.name,
            description=self.description,
            price=self.price,
            stock=self.stock,
        )


class ProductResponse(BaseModel):
    """A stored product."""

    id: UUID
    name: str
    description: str
    price: Decimal
    stock: int

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            stock=product.stock,
        )
