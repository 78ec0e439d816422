"""HTTP handler for the products route.

The handler dispatches by method, enforces the admin key on writes and
converts service results into responses. Every response it produces
carries the same static CORS headers.
"""

import logging
from typing import Any

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from product_store.dto import ErrorResponse, HealthCheckResponse, SaveProductsResponse
from product_store.entities import Failure, Result, Success
from product_store.protocols import KeyValueStore
from product_store.services import ProductService, loads_strict

logger = logging.getLogger(__name__)

ADMIN_KEY_HEADER = "X-Admin-Key"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, PUT, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, X-Admin-Key",
}

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
}

STORE_NOT_CONFIGURED_ERROR = "KV binding PRODUCTS_KV is not configured"
FETCH_FAILED_ERROR = "Failed to fetch products"
UNAUTHORIZED_ERROR = "Unauthorized - Invalid admin key"
METHOD_NOT_ALLOWED_ERROR = "Method not allowed"


def json_response(
    content: Any,
    status_code: int = status.HTTP_200_OK,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a JSON response carrying the CORS headers."""
    return JSONResponse(
        content=content,
        status_code=status_code,
        headers={**(headers or {}), **CORS_HEADERS},
    )


def error_response(message: str, status_code: int) -> JSONResponse:
    """Build the {"error": ...} envelope."""
    return json_response(ErrorResponse(error=message).model_dump(), status_code=status_code)


def parse_json_body(body: bytes) -> Result[Any]:
    """Parse a raw request body as JSON."""
    try:
        return Success(value=loads_strict(body))
    except ValueError as e:
        return Failure(message=str(e))


class ProductHandler:
    """HTTP handler for the product collection.

    The handler is built from explicit configuration: the admin key and
    the product service. A missing service means the store binding is
    absent, which fails every request except OPTIONS.

    Example:
        ```python
        from product_store.handlers import ProductHandler
        from product_store.repositories import InMemoryKeyValueRepository

        handler = ProductHandler.create(
            admin_key="secret",
            store=InMemoryKeyValueRepository(),
        )

        @app.api_route("/api/products", methods=["GET", "PUT", "OPTIONS"])
        async def products(request: Request):
            return await handler.dispatch(request)
        ```
    """

    def __init__(self, admin_key: str, product_service: ProductService | None) -> None:
        """Initialize the product handler.

        Args:
            admin_key: Shared secret required in the X-Admin-Key header for writes.
            product_service: Service for the collection, or None if no store is bound.
        """
        if not admin_key:
            raise ValueError("admin_key must not be empty")
        self._admin_key = admin_key
        self._products = product_service

    @classmethod
    def create(
        cls,
        admin_key: str,
        store: KeyValueStore | None,
        key: str | None = None,
    ) -> "ProductHandler":
        """Factory method to create ProductHandler around a store binding.

        Args:
            admin_key: Shared secret for writes.
            store: Key-value store, or None when the binding is absent.
            key: Record key for the collection. If None, uses settings.

        Returns:
            Configured ProductHandler
        """
        service = ProductService.create(store=store, key=key) if store is not None else None
        return cls(admin_key=admin_key, product_service=service)

    @property
    def is_store_configured(self) -> bool:
        return self._products is not None

    async def dispatch(self, request: Request) -> Response:
        """Handle any request to /api/products.

        Args:
            request: The incoming request

        Returns:
            The response for the request's method
        """
        method = request.method.upper()

        if method == "OPTIONS":
            return self.options()

        if self._products is None:
            logger.error("Rejecting %s request: product store binding is absent", method)
            return error_response(STORE_NOT_CONFIGURED_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)

        if method == "GET":
            return await self.get_products(self._products)

        if method == "PUT":
            provided_key = request.headers.get(ADMIN_KEY_HEADER)
            if not self.is_authorized(provided_key):
                logger.warning("Rejected product write: invalid admin key")
                return error_response(UNAUTHORIZED_ERROR, status.HTTP_401_UNAUTHORIZED)
            return await self.put_products(self._products, await request.body())

        return self.method_not_allowed()

    def options(self) -> Response:
        """Handle OPTIONS (preflight) requests."""
        return Response(status_code=status.HTTP_200_OK, headers=dict(CORS_HEADERS))

    def is_authorized(self, provided_key: str | None) -> bool:
        """Compare a provided admin key with the configured one."""
        return bool(provided_key) and provided_key == self._admin_key

    async def get_products(self, products: ProductService) -> Response:
        """Handle GET requests.

        Returns:
            The stored collection, or a generic 500 error
        """
        result = await products.load_products()

        if isinstance(result, Failure):
            return error_response(FETCH_FAILED_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)

        return json_response(result.value, headers=NO_CACHE_HEADERS)

    async def put_products(self, products: ProductService, body: bytes) -> Response:
        """Handle authorized PUT requests.

        Args:
            products: The product service
            body: Raw request body

        Returns:
            Save confirmation, or a 400/500 error
        """
        parsed = parse_json_body(body)
        if isinstance(parsed, Failure):
            return self._save_failed(parsed)

        validation_error = ProductService.validate_products(parsed.value)
        if validation_error is not None:
            logger.info("Rejected product write: %s", validation_error)
            return error_response(validation_error, status.HTTP_400_BAD_REQUEST)

        result = await products.save_products(parsed.value)
        if isinstance(result, Failure):
            return self._save_failed(result)

        count = result.value
        return json_response(
            SaveProductsResponse(
                ok=True,
                count=count,
                message=f"Successfully saved {count} products",
            ).model_dump()
        )

    def method_not_allowed(self) -> Response:
        """Handle any method other than GET, PUT and OPTIONS."""
        return error_response(METHOD_NOT_ALLOWED_ERROR, status.HTTP_405_METHOD_NOT_ALLOWED)

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests.

        Returns:
            HealthCheckResponse with store status
        """
        store_healthy = self._products is not None and self._products.is_healthy()

        return HealthCheckResponse(
            status="healthy" if store_healthy else "unhealthy",
            store_configured=self._products is not None,
            store_healthy=store_healthy,
        )

    @staticmethod
    def _save_failed(failure: Failure) -> JSONResponse:
        return error_response(
            f"Failed to save products: {failure.message}",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
