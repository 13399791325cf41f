"""Transaction orchestration.

This module coordinates the creation and lookup flows. Creation validates
both references, prices the transaction, persists it and writes it through to
the cache. Lookup reads through the cache with a durable-store fallback.

All collaborators are passed in explicitly through a TransactionContext.
There is no compensation step: a failure after the durable write leaves the
record persisted.
"""

import logging
from dataclasses import dataclass

from .cache_aside import read_through, write_through
from .errors import InvalidRequestError
from .model import NewTransaction, Transaction, TransactionRequest
from .pricing import compute_total
from .protocol import CacheProtocol, CustomerLookupProtocol, ProductLookupProtocol, TransactionStoreProtocol
from .validation import validate_references

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransactionContext:
    """
    Collaborators used by the orchestration functions.

    Attributes
    ----------
    customers : CustomerLookupProtocol
        Remote customer lookup.
    products : ProductLookupProtocol
        Remote product lookup.
    store : TransactionStoreProtocol
        Durable transaction store.
    cache : CacheProtocol
        Key/value cache.
    strict_cache_writes : bool
        Whether a cache-write failure fails the request.
    """

    customers: CustomerLookupProtocol
    products: ProductLookupProtocol
    store: TransactionStoreProtocol
    cache: CacheProtocol
    strict_cache_writes: bool = True


def create_transaction(context: TransactionContext, request: TransactionRequest) -> Transaction:
    """
    Create a transaction.

    Parameters
    ----------
    context : TransactionContext
        Collaborators for validation, persistence and caching.
    request : TransactionRequest
        Validated caller input.

    Returns
    -------
    Transaction
        The persisted transaction with its assigned id and timestamp.

    Raises
    ------
    ReferenceNotFoundError
        If the customer or product does not exist. Nothing is written.
    LookupUnavailableError
        If a lookup service could not be reached. Nothing is written.
    PersistenceError
        If the durable insert fails.
    CacheError
        If the write-through fails under the strict cache policy.
    """
    _, product = validate_references(context.customers, context.products, request)

    new_transaction = NewTransaction(
        customer_id=request.customer_id,
        product_id=request.product_id,
        quantity=request.quantity,
        total_price=compute_total(product, request.quantity),
    )

    transaction = write_through(context.store, context.cache, new_transaction, strict=context.strict_cache_writes)
    logger.info(
        f"Created transaction {transaction.transaction_id}: customer={transaction.customer_id} "
        f"product={transaction.product_id} quantity={transaction.quantity} total={transaction.total_price}"
    )
    return transaction


def get_transaction(context: TransactionContext, transaction_id: str) -> Transaction:
    """
    Look up a transaction by id.

    Raises
    ------
    InvalidRequestError
        If the id is missing or blank.
    TransactionNotFoundError
        If the id is unknown.
    """
    if not transaction_id or not transaction_id.strip():
        raise InvalidRequestError("Missing id parameter")

    return read_through(context.store, context.cache, transaction_id.strip(), strict=context.strict_cache_writes)
