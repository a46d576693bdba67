"""
Domain entities for the catalog bounded context.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional
from uuid import UUID

PRODUCT_ENTITY = "Product"


@dataclass(frozen=True)
class Product:
    """A product listed in the catalog.

    Attributes:
        id: Server-assigned identifier; None until stored.
        name: Display name.
        description: Free-text description.
        price: Unit price, strictly positive.
        stock: Units available, never negative.
    """

    name: str = ""
    description: str = ""
    price: Decimal = Decimal("0")
    stock: int = 0
    id: Optional[UUID] = None
