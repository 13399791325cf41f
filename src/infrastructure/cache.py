"""
Redis cache module.

This module provides the Redis-backed cache used for transaction
write-through and read-through. Payloads are opaque bytes and keys never
expire. All Redis errors are translated into CacheError.
"""

import logging

import redis
from redis import Redis

from core.errors import CacheError

logger = logging.getLogger(__name__)


def create_redis_client(redis_url: str, timeout: float = 2.0) -> Redis:
    """
    Create a Redis client with bounded socket timeouts.

    Parameters
    ----------
    redis_url : str
        Redis connection URL (e.g., 'redis://localhost:6379/0').
    timeout : float, optional
        Connect and read timeout in seconds, by default 2.0.

    Returns
    -------
    Redis
        Synchronous Redis client. Connections are opened lazily.
    """
    return redis.from_url(redis_url, socket_timeout=timeout, socket_connect_timeout=timeout)


class RedisCache:
    """Cache backed by a Redis client."""

    def __init__(self, client: Redis) -> None:
        self.client = client

    def get(self, key: str) -> bytes | None:
        """
        Return the payload stored under key, or None on a miss.

        Raises
        ------
        CacheError
            If Redis cannot be reached or the command fails.
        """
        try:
            return self.client.get(key)
        except redis.RedisError as exc:
            logger.error(f"Cache read failed for {key}: {exc}")
            raise CacheError(f"Failed to read cache entry {key}: {exc}") from exc

    def set(self, key: str, value: bytes) -> None:
        """
        Store value under key without expiry.

        Raises
        ------
        CacheError
            If Redis cannot be reached or the command fails.
        """
        try:
            self.client.set(key, value)
        except redis.RedisError as exc:
            raise CacheError(f"Failed to cache transaction under {key}: {exc}") from exc
