from typing import Any

from fastapi import FastAPI, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_store.api.dependencies import HandlerDep, get_handler, lifespan
from product_store.config import Settings, settings
from product_store.protocols import KeyValueStore

PRODUCTS_PATH = "/api/products"

# Methods routed to the products handler. Starlette adds HEAD next to GET;
# HEAD and unlisted methods end in the handler's 405 branch.
PRODUCTS_METHODS = ["GET", "PUT", "OPTIONS", "POST", "DELETE", "PATCH"]


async def products_http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Send unrouted methods on the products path through the products handler."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED and request.url.path == PRODUCTS_PATH:
        return await get_handler(request).dispatch(request)
    return await http_exception_handler(request, exc)


def create_app(config: Settings | None = None, store: KeyValueStore | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        config: Application settings. If None, uses global settings.
        store: Store to use instead of the one PRODUCTS_KV_URL describes.

    Returns:
        The configured FastAPI app
    """
    app = FastAPI(
        title="Product Store API",
        description="Product collection stored in a key-value store",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = config or settings
    app.state.store = store

    app.add_exception_handler(StarletteHTTPException, products_http_exception_handler)  # type: ignore[arg-type]

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Product Store API",
            "version": "0.1.0",
            "endpoints": {
                "products": PRODUCTS_PATH,
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health")
    async def health(handler: HandlerDep) -> JSONResponse:
        """Health check endpoint."""
        result = await handler.health_check()
        status_code = (
            status.HTTP_200_OK if result.store_healthy else status.HTTP_503_SERVICE_UNAVAILABLE
        )
        return JSONResponse(content=result.model_dump(), status_code=status_code)

    @app.api_route(PRODUCTS_PATH, methods=PRODUCTS_METHODS)
    async def products(request: Request, handler: HandlerDep) -> Response:
        """Read (GET) or replace (PUT) the product collection."""
        return await handler.dispatch(request)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "product_store.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
