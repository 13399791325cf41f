"""
Collaborator protocol definitions for the transaction orchestrator.

This module defines the capability interfaces the core depends on: the two
remote lookup services, the durable transaction store, and the key/value
cache. Any class implementing these methods satisfies the protocol (PEP 544),
which keeps the core testable with in-memory substitutes.
"""

from typing import Protocol

from .model import Customer, NewTransaction, Product, Transaction


class CustomerLookupProtocol(Protocol):
    """Remote customer lookup."""

    def get_customer(self, customer_id: str) -> Customer:
        """
        Fetch a customer by id.

        Raises
        ------
        ReferenceNotFoundError
            If the service reports the customer absent.
        LookupUnavailableError
            If the service could not be reached or answered malformed data.
        """
        ...


class ProductLookupProtocol(Protocol):
    """Remote product lookup."""

    def get_product(self, product_id: str) -> Product:
        """
        Fetch a product by id.

        Raises
        ------
        ReferenceNotFoundError
            If the service reports the product absent.
        LookupUnavailableError
            If the service could not be reached or answered malformed data.
        """
        ...


class TransactionStoreProtocol(Protocol):
    """
    Durable transaction store.

    Methods
    -------
    insert(transaction: NewTransaction) -> Transaction
        Persist a new transaction; the store assigns id and creation time.
    get(transaction_id: str) -> Transaction | None
        Point lookup by id, None when absent.

    Notes
    -----
    Implementations raise PersistenceError for any storage failure.
    """

    def insert(self, transaction: NewTransaction) -> Transaction: ...

    def get(self, transaction_id: str) -> Transaction | None: ...


class CacheProtocol(Protocol):
    """
    Key/value cache with opaque byte payloads and no expiry.

    Methods
    -------
    get(key: str) -> bytes | None
        Return the stored payload, None (or empty bytes) on miss.
    set(key: str, value: bytes) -> None
        Store the payload under key, overwriting any previous value.

    Notes
    -----
    Implementations raise CacheError for any cache failure.
    """

    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, value: bytes) -> None: ...
