"""Product service for core business logic.

This service owns the product collection: it is the only code that
talks to the key-value store, and it converts store failures into
result values for the handler to match on.
"""

import json
import logging
from typing import Any

from product_store.config import settings
from product_store.entities import Failure, Product, Result, Success, has_valid_id
from product_store.protocols import KeyValueStore

logger = logging.getLogger(__name__)

NOT_AN_ARRAY_ERROR = "Request body must be an array of products"
MISSING_ID_ERROR = "Each product must have a string 'id' field"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def loads_strict(text: str | bytes) -> Any:
    """Parse standard JSON, rejecting NaN, Infinity and -Infinity."""
    return json.loads(text, parse_constant=_reject_constant)


def serialize_products(products: list[Product]) -> str:
    """Serialize a collection as compact JSON."""
    return json.dumps(products, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


class ProductService:
    """Product collection service.

    The collection lives under a single key and is always read and
    written as a whole. There is no per-item update and no merge.

    Example:
        ```python
        from product_store.repositories import InMemoryKeyValueRepository
        from product_store.services import ProductService

        service = ProductService.create(store=InMemoryKeyValueRepository())
        result = await service.save_products([{"id": "a"}])
        ```
    """

    def __init__(self, store: KeyValueStore, key: str | None = None) -> None:
        """Initialize the product service.

        Args:
            store: Key-value store backend (required).
            key: Record key for the collection. Defaults to settings.
        """
        self._store = store
        self._key = key or settings.products_key

    @classmethod
    def create(cls, store: KeyValueStore, key: str | None = None) -> "ProductService":
        """Factory method to create ProductService.

        Args:
            store: Key-value store backend (required).
            key: Record key. If None, uses settings.

        Returns:
            Configured ProductService instance
        """
        return cls(store=store, key=key)

    @property
    def key(self) -> str:
        return self._key

    @staticmethod
    def validate_products(body: Any) -> str | None:
        """Check a write payload, stopping at the first violation.

        Args:
            body: Parsed JSON request body

        Returns:
            An error message, or None if the payload is valid
        """
        if not isinstance(body, list):
            return NOT_AN_ARRAY_ERROR

        for item in body:
            if not has_valid_id(item):
                return MISSING_ID_ERROR

        return None

    async def load_products(self) -> Result[Any]:
        """Read the stored collection.

        An absent or empty value reads as an empty collection. Stored
        data is returned as parsed, without re-validation.

        Returns:
            Success with the parsed collection, or Failure
        """
        try:
            raw = self._store.get(self._key)
            data = loads_strict(raw) if raw else []
        except Exception as e:
            logger.exception("Failed to read products from key %r", self._key)
            return Failure(message=str(e))

        return Success(value=data)

    async def save_products(self, products: list[Product]) -> Result[int]:
        """Replace the stored collection.

        Callers validate with validate_products first; nothing is
        written for an invalid payload.

        Args:
            products: The full collection to store

        Returns:
            Success with the number of products saved, or Failure
        """
        try:
            self._store.put(self._key, serialize_products(products))
        except Exception as e:
            logger.exception("Failed to write products to key %r", self._key)
            return Failure(message=str(e))

        logger.info("Saved %d products", len(products))
        return Success(value=len(products))

    def is_healthy(self) -> bool:
        """Check if the backing store is reachable."""
        return self._store.health_check()
