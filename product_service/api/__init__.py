"""FastAPI application setup."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from product_service.api.controller import product_router
from product_service.api.error_handlers import register_error_handlers
from product_service.clients import build_product_store
from product_service.config import get_config
from product_service.services import ProductService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _store_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the configured store on startup and release it on shutdown."""
    store, cosmos_client = build_product_store(get_config())
    if cosmos_client is not None:
        await cosmos_client.connect()
        logger.info("Connected to Cosmos DB")

    app.state.product_service = ProductService(store)
    try:
        yield
    finally:
        if cosmos_client is not None:
            await cosmos_client.close()
            logger.info("Closed Cosmos DB connection")


def create_app(service: Optional[ProductService] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        service: A ready ProductService to serve. When omitted the store is
            built from configuration at startup.
    """
    app = FastAPI(
        title="Product Catalog API",
        description="CRUD API for the product catalog",
        version="1.0.0",
        lifespan=None if service is not None else _store_lifespan,
    )
    if service is not None:
        app.state.product_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production: specify frontend origin
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(product_router)

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
