"""Handler layer for HTTP endpoints.

Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .product_handler import CORS_HEADERS, ProductHandler

__all__ = [
    "CORS_HEADERS",
    "ProductHandler",
]
