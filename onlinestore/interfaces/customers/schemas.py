"""
Pydantic schemas for the customers API.

Request schemas carry types only. Business rules (presence, length,
email format) are enforced by the customer validator so that every
violation is reported together as a validation error. Absent and
null fields both reach the validator as None.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from onlinestore.domain.customers.entities import Customer


class CustomerRequest(BaseModel):
    """Request body for creating or updating a customer."""

    name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None

    def to_entity(self) -> Customer:
        return Customer(name=self.name, email=self.email, address=self.address)


class CustomerResponse(BaseModel):
    """A stored customer."""

    id: UUID
    name: str
    email: str
    address: str

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerResponse":
        return cls(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            address=customer.address,
        )
