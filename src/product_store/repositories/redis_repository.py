"""Redis implementation of KeyValueStore.

Values are stored as plain Redis strings. This satisfies the
KeyValueStore protocol through structural typing.
"""

import logging

import redis

from product_store.config import Settings, get_redis_client

logger = logging.getLogger(__name__)


class RedisKeyValueRepository:
    """Redis-backed key-value store.

    Uses GET/SET only: a write replaces the whole value and there is
    no read-modify-write, so concurrent writers are last-write-wins.
    """

    def __init__(self, redis_client: redis.Redis) -> None:
        """Initialize the Redis repository.

        Args:
            redis_client: Redis client instance, created with decode_responses=True.
        """
        self._client = redis_client

    @classmethod
    def create(cls, config: Settings | None = None) -> "RedisKeyValueRepository":
        """Factory method to create RedisKeyValueRepository from settings.

        Args:
            config: Settings carrying PRODUCTS_KV_URL. If None, uses global settings.

        Returns:
            Configured RedisKeyValueRepository
        """
        return cls(redis_client=get_redis_client(config))

    def get(self, key: str) -> str | None:
        value = self._client.get(key)
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value  # type: ignore[return-value]

    def put(self, key: str, value: str) -> None:
        self._client.set(key, value)

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError as e:
            logger.warning("Redis health check failed: %s", e)
            return False

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
