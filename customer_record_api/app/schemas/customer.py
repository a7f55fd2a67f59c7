"""
Pydantic models for customer payloads.

Request fields are declared as optional strings on purpose: syntax
rules are enforced by ``core.validation`` so that a missing or
malformed field produces the service's own 400 message rather than a
generic schema error.  Numbers sent for string fields (e.g. a phone
number posted as a JSON integer) are coerced to strings.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class CustomerBase(BaseModel):
    first_name: Optional[str] = Field(None, examples=["Ann"])
    last_name: Optional[str] = Field(None, examples=["Lee"])
    phone_number: Optional[str] = Field(None, examples=["5551234567"])
    email: Optional[str] = Field(None, examples=["a@b.com"])
    address: Optional[str] = Field(None, examples=["1 Main St"])


class CustomerCreate(CustomerBase):
    """Body of ``POST /customers``."""

    model_config = {
        "coerce_numbers_to_str": True,
    }


class CustomerUpdate(CustomerCreate):
    """Body of ``PUT /customers/{id}``.  All five fields are rewritten."""
    pass


class CustomerRead(CustomerBase):
    """A stored customer row."""

    id: int


class CustomerCreated(BaseModel):
    message: str
    id: int


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class CustomerPage(BaseModel):
    """One page of customers plus the derived counts.

    Field names are camelCase because they are part of the public
    response contract.
    """

    totalCustomers: int
    totalPages: int
    customers: List[CustomerRead]
