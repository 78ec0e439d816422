"""Repository layer for data access.

This layer hides the key-value backend behind the KeyValueStore protocol.
The repositories are protocol-based (structural typing), not
inheritance-based.
"""

import logging

from product_store.config import Settings
from product_store.protocols import KeyValueStore

from .memory_repository import InMemoryKeyValueRepository
from .redis_repository import RedisKeyValueRepository

logger = logging.getLogger(__name__)


def create_store(config: Settings) -> KeyValueStore | None:
    """Build the store binding described by PRODUCTS_KV_URL.

    Args:
        config: Application settings

    Returns:
        The configured store, or None when no binding is configured
    """
    if not config.products_kv_url:
        logger.warning("PRODUCTS_KV_URL is not set; product store binding is absent")
        return None

    if config.is_memory_store:
        logger.info("Using in-memory product store")
        return InMemoryKeyValueRepository()

    logger.info("Using Redis product store")
    return RedisKeyValueRepository.create(config)


__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueRepository",
    "RedisKeyValueRepository",
    "create_store",
]
