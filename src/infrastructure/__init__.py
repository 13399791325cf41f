"""Infrastructure layer for the transaction service.

This package provides core infrastructure components including:
- HTTP clients for the customer and product lookup services
- Durable transaction storage with SQLAlchemy
- Redis-backed transaction cache
- Context wiring for the orchestrator
"""

from .api import CustomerServiceClient, ProductServiceClient, fetch_customer, fetch_product
from .cache import RedisCache, create_redis_client
from .database import SqlTransactionStore, create_db_engine, db_transaction, init_db
from .service import build_context

__all__ = [
    "fetch_customer",
    "fetch_product",
    "CustomerServiceClient",
    "ProductServiceClient",
    "RedisCache",
    "create_redis_client",
    "SqlTransactionStore",
    "create_db_engine",
    "db_transaction",
    "init_db",
    "build_context",
]
