"""
Core business logic layer for transaction processing.

This package provides core domain logic including:
- Pydantic models for transaction requests, collaborator projections and
  persisted transactions
- Cross-service reference validation and pricing
- Cache-aside coordination between the durable store and the cache
- Orchestration of the creation and lookup flows
"""

from .orchestrate import TransactionContext, create_transaction, get_transaction

__all__ = ["TransactionContext", "create_transaction", "get_transaction"]
