"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from product_store.services import ProductService

    service = ProductService.create(store=store)
    service = ProductService.create(store=store, key="products")
    ```
"""

from .product_service import MISSING_ID_ERROR, NOT_AN_ARRAY_ERROR, ProductService, loads_strict

__all__ = [
    "ProductService",
    "NOT_AN_ARRAY_ERROR",
    "MISSING_ID_ERROR",
    "loads_strict",
]
