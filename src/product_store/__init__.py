"""Product Store - a product collection kept in a key-value store.

This package provides a layered architecture for a single products route:

Layers:
    - protocols: Interface contracts (KeyValueStore)
    - repositories: Data access implementations (Redis, in-memory)
    - services: Business logic (load, validate, save)
    - handlers: HTTP request dispatch
    - dto: Data transfer objects (API contracts)
    - entities: Domain values (products, results)

Usage:
    ```python
    from product_store.handlers import ProductHandler
    from product_store.repositories import InMemoryKeyValueRepository

    handler = ProductHandler.create(admin_key="secret", store=InMemoryKeyValueRepository())
    ```

For HTTP API:
    ```python
    from product_store.api.app import app, create_app
    ```
"""

from product_store.config import ConfigurationError, Settings, get_settings, settings
from product_store.dto import ErrorResponse, HealthCheckResponse, SaveProductsResponse
from product_store.entities import Failure, Result, Success
from product_store.handlers import ProductHandler
from product_store.protocols import KeyValueStore
from product_store.repositories import InMemoryKeyValueRepository, RedisKeyValueRepository
from product_store.services import ProductService

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    "Settings",
    "ConfigurationError",
    # Protocols (interfaces)
    "KeyValueStore",
    # Services (business logic)
    "ProductService",
    # Handlers (HTTP)
    "ProductHandler",
    # Repositories (data access)
    "RedisKeyValueRepository",
    "InMemoryKeyValueRepository",
    # Entities (domain values)
    "Success",
    "Failure",
    "Result",
    # DTOs (API contracts)
    "ErrorResponse",
    "SaveProductsResponse",
    "HealthCheckResponse",
]
