"""
Shared fixtures for the product store tests.
"""

import pytest
from fastapi.testclient import TestClient

from product_store.api.app import create_app
from product_store.config import Settings
from product_store.repositories import InMemoryKeyValueRepository

# Test-only admin key; the application itself has no default.
ADMIN_KEY = "test-admin-key"

PRODUCTS_URL = "/api/products"


class FailingStore:
    """Store whose every call raises."""

    def __init__(self, message: str = "store unavailable") -> None:
        self.message = message

    def get(self, key: str) -> str | None:
        raise RuntimeError(self.message)

    def put(self, key: str, value: str) -> None:
        raise RuntimeError(self.message)

    def health_check(self) -> bool:
        return False


def make_settings(**overrides) -> Settings:
    """Build settings independent of the environment."""
    values = {
        "admin_key": ADMIN_KEY,
        "products_kv_url": "memory://",
        "products_kv_password": None,
        "products_key": "products",
        "log_level": "INFO",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def store():
    """Create an empty in-memory store."""
    return InMemoryKeyValueRepository()


@pytest.fixture
def client(store):
    """Create a test client backed by the in-memory store."""
    app = create_app(make_settings(), store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers():
    """Headers carrying the valid admin key."""
    return {"X-Admin-Key": ADMIN_KEY}
