"""
Pydantic data models for transaction processing.

This module defines the request, collaborator projection, and persisted
transaction models. Validation of caller input happens here so that the
orchestration layer only ever sees well-formed values.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Customer(BaseModel):
    """
    Read-only projection of a customer from the customer service.

    Attributes
    ----------
    customer_id : str
        Customer identifier.
    name : str
        Customer display name.
    email : str | None
        Contact email, if the service returns one.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    customer_id: str
    name: str
    email: str | None = None


class Product(BaseModel):
    """
    Read-only projection of a product from the product service.

    Attributes
    ----------
    product_id : str
        Product identifier.
    name : str
        Product display name.
    price : float
        Unit price used to compute the transaction total.
    stock : int | None
        Units in stock, informational only.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    product_id: str
    name: str
    price: float
    stock: int | None = None


class TransactionRequest(BaseModel):
    """
    Caller input for transaction creation.

    Attributes
    ----------
    customer_id : str
        Customer placing the order. Must be non-blank.
    product_id : str
        Product being ordered. Must be non-blank.
    quantity : int
        Number of units, strictly positive. Must be a JSON integer: booleans,
        numeric strings and floats are rejected.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    customer_id: str
    product_id: str
    quantity: int = Field(gt=0, strict=True)

    @field_validator("customer_id", "product_id")
    @classmethod
    def id_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only identifiers."""
        if not v or not v.strip():
            raise ValueError("identifier cannot be blank")
        return v.strip()


class NewTransaction(BaseModel):
    """A validated and priced transaction that has not been persisted yet."""

    customer_id: str
    product_id: str
    quantity: int
    total_price: float


class Transaction(BaseModel):
    """
    Persisted transaction.

    ``transaction_id`` and ``created_at`` are assigned by the durable store
    and never change afterwards. ``total_price`` is the price observed at
    creation time and is never recomputed.
    """

    model_config = ConfigDict(frozen=True)

    transaction_id: str
    customer_id: str
    product_id: str
    quantity: int
    total_price: float
    created_at: datetime
