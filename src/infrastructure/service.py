"""Transaction service wiring.

This module builds the TransactionContext from runtime settings, connecting
the core orchestration to the HTTP lookup clients, the SQLAlchemy store and
the Redis cache.
"""

from redis import Redis
from sqlalchemy.engine import Engine

from core import TransactionContext

from .api import CustomerServiceClient, ProductServiceClient
from .cache import RedisCache, create_redis_client
from .database import SqlTransactionStore, create_db_engine


def build_context(
    settings, engine: Engine | None = None, redis_client: Redis | None = None
) -> TransactionContext:
    """
    Build the orchestrator context from settings.

    Parameters
    ----------
    settings : Settings
        Runtime configuration (service URLs, connection URLs, timeouts and
        cache policy).
    engine : Engine | None, optional
        Pre-built SQLAlchemy engine. Created from ``settings.database_url``
        when omitted.
    redis_client : Redis | None, optional
        Pre-built Redis client. Created from ``settings.redis_url`` when
        omitted.

    Returns
    -------
    TransactionContext
        Context holding the real collaborators.
    """
    if engine is None:
        engine = create_db_engine(settings.database_url, timeout=settings.db_timeout)
    if redis_client is None:
        redis_client = create_redis_client(settings.redis_url, timeout=settings.cache_timeout)

    return TransactionContext(
        customers=CustomerServiceClient(settings.customer_service_url, timeout=settings.request_timeout),
        products=ProductServiceClient(settings.product_service_url, timeout=settings.request_timeout),
        store=SqlTransactionStore(engine),
        cache=RedisCache(redis_client),
        strict_cache_writes=settings.cache_write_strict,
    )
