"""Tests for the Redis cache adapter."""

from unittest.mock import MagicMock

import pytest
import redis

from core.errors import CacheError
from infrastructure.cache import RedisCache, create_redis_client


class TestRedisCache:
    """Test suite for RedisCache with a mocked Redis client."""

    def test_get_returns_payload(self):
        client = MagicMock()
        client.get.return_value = b'{"transaction_id": "t-1"}'

        assert RedisCache(client).get("transaction-t-1") == b'{"transaction_id": "t-1"}'
        client.get.assert_called_once_with("transaction-t-1")

    def test_get_miss_returns_none(self):
        client = MagicMock()
        client.get.return_value = None

        assert RedisCache(client).get("transaction-unknown") is None

    def test_set_stores_without_expiry(self):
        client = MagicMock()

        RedisCache(client).set("transaction-t-1", b"payload")

        client.set.assert_called_once_with("transaction-t-1", b"payload")

    @pytest.mark.parametrize(
        "error",
        [redis.exceptions.ConnectionError("refused"), redis.exceptions.TimeoutError("timed out")],
    )
    def test_redis_errors_become_cache_errors(self, error):
        client = MagicMock()
        client.get.side_effect = error
        client.set.side_effect = error
        cache = RedisCache(client)

        with pytest.raises(CacheError):
            cache.get("transaction-t-1")
        with pytest.raises(CacheError):
            cache.set("transaction-t-1", b"payload")


class TestCreateRedisClient:
    def test_applies_socket_timeouts(self):
        """Test that the client is built lazily with bounded timeouts."""
        client = create_redis_client("redis://localhost:6379/0", timeout=1.5)

        connection_kwargs = client.connection_pool.connection_kwargs
        assert connection_kwargs["socket_timeout"] == 1.5
        assert connection_kwargs["socket_connect_timeout"] == 1.5
        client.close()
