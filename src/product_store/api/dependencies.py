"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Settings and an optional store override are put on app.state by create_app
    - The handler is built during lifespan and stored in app.state
    - Dependency functions retrieve it from request.app.state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from product_store.config import Settings, configure_logging
from product_store.handlers import ProductHandler
from product_store.repositories import create_store

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> ProductHandler:
    """Dependency injection for ProductHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The ProductHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "product_handler", None)
    if handler is None:
        raise RuntimeError("ProductHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Builds the layers from app.state.settings:
    1. Store binding - app.state.store if given, otherwise from PRODUCTS_KV_URL
    2. Handler (HTTP) - stored in app.state.product_handler

    Args:
        app: The FastAPI application instance

    Yields:
        None

    Raises:
        ConfigurationError: If ADMIN_KEY is not configured
    """
    config: Settings = app.state.settings
    configure_logging(config.log_level)
    admin_key = config.require_admin_key()

    store = app.state.store
    if store is None:
        store = create_store(config)

    handler = ProductHandler.create(admin_key=admin_key, store=store, key=config.products_key)
    app.state.product_handler = handler

    logger.info("Product store API started")
    logger.info("Products key: %s", config.products_key)
    logger.info("Store configured: %s", handler.is_store_configured)
    if store is not None:
        logger.info("Store healthy: %s", store.health_check())

    yield

    del app.state.product_handler
    logger.info("Product store API shut down")


HandlerDep = Annotated[ProductHandler, Depends(get_handler)]
