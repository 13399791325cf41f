"""Pytest configuration and shared fixtures for transaction service tests."""

import sys
from datetime import datetime, timezone
from pathlib import Path
from uuid import uuid4

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from core import TransactionContext  # noqa: E402
from core.errors import (  # noqa: E402
    CacheError,
    LookupUnavailableError,
    PersistenceError,
    ReferenceNotFoundError,
)
from core.model import Customer, NewTransaction, Product, Transaction  # noqa: E402
from infrastructure.database import SqlTransactionStore, init_db  # noqa: E402


class FakeCustomers:
    """
    In-memory customer lookup implementing CustomerLookupProtocol.

    Tracks requested ids for assertions. When ``available`` is False every
    lookup fails as if the service were unreachable.
    """

    def __init__(self, customers: dict[str, Customer] | None = None):
        self.customers = customers or {}
        self.available = True
        self.calls = []

    def get_customer(self, customer_id: str) -> Customer:
        self.calls.append(customer_id)
        if not self.available:
            raise LookupUnavailableError("customer", customer_id, "connection refused")
        if customer_id not in self.customers:
            raise ReferenceNotFoundError("customer", customer_id, "Customer not found")
        return self.customers[customer_id]


class FakeProducts:
    """In-memory product lookup implementing ProductLookupProtocol."""

    def __init__(self, products: dict[str, Product] | None = None):
        self.products = products or {}
        self.available = True
        self.calls = []

    def get_product(self, product_id: str) -> Product:
        self.calls.append(product_id)
        if not self.available:
            raise LookupUnavailableError("product", product_id, "connection refused")
        if product_id not in self.products:
            raise ReferenceNotFoundError("product", product_id, "Product not found")
        return self.products[product_id]


class InMemoryStore:
    """
    Dict-backed durable store implementing TransactionStoreProtocol.

    Setting ``available`` to False makes every operation raise
    PersistenceError, simulating an unreachable database.
    """

    def __init__(self):
        self.rows: dict[str, Transaction] = {}
        self.available = True
        self.get_calls = 0

    def insert(self, transaction: NewTransaction) -> Transaction:
        if not self.available:
            raise PersistenceError("Failed to create transaction: database unreachable")
        persisted = Transaction(
            transaction_id=str(uuid4()),
            created_at=datetime.now(timezone.utc),
            **transaction.model_dump(),
        )
        self.rows[persisted.transaction_id] = persisted
        return persisted

    def get(self, transaction_id: str) -> Transaction | None:
        self.get_calls += 1
        if not self.available:
            raise PersistenceError(f"Failed to read transaction {transaction_id}: database unreachable")
        return self.rows.get(transaction_id)


class InMemoryCache:
    """
    Dict-backed cache implementing CacheProtocol.

    ``fail_reads`` and ``fail_writes`` make the respective operation raise
    CacheError.
    """

    def __init__(self):
        self.entries: dict[str, bytes] = {}
        self.fail_reads = False
        self.fail_writes = False
        self.set_calls = 0

    def get(self, key: str) -> bytes | None:
        if self.fail_reads:
            raise CacheError(f"Failed to read cache entry {key}: connection refused")
        return self.entries.get(key)

    def set(self, key: str, value: bytes) -> None:
        self.set_calls += 1
        if self.fail_writes:
            raise CacheError(f"Failed to cache transaction under {key}: connection refused")
        self.entries[key] = value


@pytest.fixture
def sample_customer():
    """Fixture providing an existing customer."""
    return Customer(customer_id="C1", name="Alice", email="alice@example.com")


@pytest.fixture
def sample_product():
    """Fixture providing an existing product priced 10.0."""
    return Product(product_id="P1", name="Widget", price=10.0, stock=50)


@pytest.fixture
def customers(sample_customer):
    return FakeCustomers({sample_customer.customer_id: sample_customer})


@pytest.fixture
def products(sample_product):
    return FakeProducts(
        {
            sample_product.product_id: sample_product,
            "P2": Product(product_id="P2", name="Gadget", price=19.99, stock=3),
        }
    )


@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture
def cache():
    return InMemoryCache()


@pytest.fixture
def context(customers, products, memory_store, cache):
    """Fixture providing an orchestrator context backed by in-memory fakes."""
    return TransactionContext(customers=customers, products=products, store=memory_store, cache=cache)


@pytest.fixture
def sqlite_engine():
    """Fixture providing an in-memory SQLite engine with the schema created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_store(sqlite_engine):
    return SqlTransactionStore(sqlite_engine)


@pytest.fixture
def sample_request_body():
    """Fixture providing a valid creation request body."""
    return {"customer_id": "C1", "product_id": "P1", "quantity": 3}
