"""
Tests for the key-value repositories.
"""

from unittest.mock import MagicMock

import pytest
import redis

from product_store.protocols import KeyValueStore
from product_store.repositories import (
    InMemoryKeyValueRepository,
    RedisKeyValueRepository,
    create_store,
)

from .conftest import make_settings


def test_repositories_satisfy_protocol():
    assert isinstance(InMemoryKeyValueRepository(), KeyValueStore)
    assert isinstance(RedisKeyValueRepository(MagicMock()), KeyValueStore)


def test_memory_repository_get_put():
    repo = InMemoryKeyValueRepository({"seed": "1"})
    assert repo.get("seed") == "1"
    assert repo.get("missing") is None

    repo.put("seed", "2")
    assert repo.get("seed") == "2"
    assert repo.health_check() is True


def test_redis_repository_get():
    client = MagicMock()
    client.get.return_value = '[{"id":"a"}]'
    repo = RedisKeyValueRepository(client)

    assert repo.get("products") == '[{"id":"a"}]'
    client.get.assert_called_once_with("products")


def test_redis_repository_decodes_bytes():
    client = MagicMock()
    client.get.return_value = "Füller".encode("utf-8")
    assert RedisKeyValueRepository(client).get("products") == "Füller"


def test_redis_repository_get_missing():
    client = MagicMock()
    client.get.return_value = None
    assert RedisKeyValueRepository(client).get("products") is None


def test_redis_repository_put_overwrites():
    client = MagicMock()
    RedisKeyValueRepository(client).put("products", "[]")
    client.set.assert_called_once_with("products", "[]")


def test_redis_repository_put_propagates_errors():
    client = MagicMock()
    client.set.side_effect = redis.ConnectionError("refused")
    repo = RedisKeyValueRepository(client)

    with pytest.raises(redis.ConnectionError, match="refused"):
        repo.put("products", "[]")


def test_redis_repository_health_check():
    client = MagicMock()
    client.ping.return_value = True
    assert RedisKeyValueRepository(client).health_check() is True

    client.ping.side_effect = redis.ConnectionError("refused")
    assert RedisKeyValueRepository(client).health_check() is False


def test_create_store_without_binding():
    assert create_store(make_settings(products_kv_url=None)) is None


def test_create_store_memory():
    store = create_store(make_settings(products_kv_url="memory://"))
    assert isinstance(store, InMemoryKeyValueRepository)


def test_create_store_redis():
    store = create_store(make_settings(products_kv_url="redis://localhost:6379/0"))
    assert isinstance(store, RedisKeyValueRepository)
