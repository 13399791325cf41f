"""
Cache-aside coordination between the durable store and the cache.

This module provides the write-through (creation) and read-through with
backfill (lookup) policies. Both are plain functions parameterized by a
TransactionStoreProtocol and a CacheProtocol so they carry no transport or
driver dependency.

The durable write and the cache write are two independent steps. A cache
failure after a successful durable write is never compensated: the record
stays persisted. Whether that failure fails the caller's request is decided
by the ``strict`` flag.
"""

import logging

from pydantic import ValidationError as PydanticValidationError

from .errors import CacheError, TransactionNotFoundError
from .model import NewTransaction, Transaction
from .protocol import CacheProtocol, TransactionStoreProtocol

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "transaction-"


def cache_key(transaction_id: str) -> str:
    """Return the cache key for a transaction id."""
    return f"{CACHE_KEY_PREFIX}{transaction_id}"


def serialize_transaction(transaction: Transaction) -> bytes:
    """Serialize a persisted transaction to its cached JSON payload."""
    return transaction.model_dump_json().encode("utf-8")


def deserialize_transaction(payload: bytes) -> Transaction:
    """Parse a cached JSON payload back into a Transaction."""
    return Transaction.model_validate_json(payload)


def _store_in_cache(cache: CacheProtocol, transaction: Transaction, strict: bool) -> None:
    key = cache_key(transaction.transaction_id)
    try:
        cache.set(key, serialize_transaction(transaction))
    except CacheError as exc:
        if strict:
            logger.error(f"Failed to cache transaction {transaction.transaction_id}: {exc}")
            raise
        logger.warning(f"Transaction {transaction.transaction_id} persisted but not cached: {exc}")
        return
    logger.debug(f"Cached transaction under {key}")


def write_through(
    store: TransactionStoreProtocol, cache: CacheProtocol, new_transaction: NewTransaction, strict: bool = True
) -> Transaction:
    """
    Persist a transaction and mirror it into the cache.

    Parameters
    ----------
    store : TransactionStoreProtocol
        Durable store; assigns the id and creation timestamp.
    cache : CacheProtocol
        Cache receiving the serialized persisted record.
    new_transaction : NewTransaction
        Validated and priced transaction to persist.
    strict : bool, optional
        When True a cache failure is raised to the caller, when False it is
        logged and the persisted record is returned. By default True.

    Returns
    -------
    Transaction
        The persisted record.

    Raises
    ------
    PersistenceError
        If the durable insert fails. Nothing is cached in that case.
    CacheError
        If ``strict`` and the cache write fails. The durable record remains.
    """
    transaction = store.insert(new_transaction)
    logger.info(f"Persisted transaction {transaction.transaction_id}")
    _store_in_cache(cache, transaction, strict)
    return transaction


def read_through(
    store: TransactionStoreProtocol, cache: CacheProtocol, transaction_id: str, strict: bool = True
) -> Transaction:
    """
    Look up a transaction, preferring the cache and backfilling it on a miss.

    Parameters
    ----------
    store : TransactionStoreProtocol
        Durable store consulted on a cache miss.
    cache : CacheProtocol
        Cache consulted first.
    transaction_id : str
        Transaction identifier.
    strict : bool, optional
        Backfill failure policy, same meaning as in ``write_through``.

    Returns
    -------
    Transaction
        The cached or persisted record.

    Raises
    ------
    TransactionNotFoundError
        If the id is neither cached nor persisted.
    CacheError
        If the cache read fails, or if ``strict`` and the backfill fails.
    PersistenceError
        If the durable lookup fails.

    Notes
    -----
    A cached payload that does not parse is treated as a miss; the backfill
    then overwrites it with the durable record.
    """
    payload = cache.get(cache_key(transaction_id))

    if payload:
        try:
            transaction = deserialize_transaction(payload)
        except PydanticValidationError as exc:
            logger.warning(f"Discarding unreadable cache entry for {transaction_id}: {exc}")
        else:
            logger.debug(f"Cache hit for transaction {transaction_id}")
            return transaction

    logger.debug(f"Cache miss for transaction {transaction_id}, reading durable store")
    transaction = store.get(transaction_id)
    if transaction is None:
        raise TransactionNotFoundError(transaction_id)

    _store_in_cache(cache, transaction, strict)
    return transaction
