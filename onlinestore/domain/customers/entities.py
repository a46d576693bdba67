"""
Domain entities for the customers bounded context.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

CUSTOMER_ENTITY = "Customer"


@dataclass(frozen=True)
class Customer:
    """A registered store customer."""

    name: str = ""
    email: str = ""
    address: str = ""
    id: Optional[UUID] = None
