"""Builds the configured ProductStore."""

import logging
from typing import Optional, Tuple

from product_service.clients.cosmos_product_store import CosmosProductStore
from product_service.clients.cosmosdb_client import CosmosDBClient
from product_service.clients.memory_product_store import InMemoryProductStore
from product_service.clients.product_store import ProductStore
from product_service.config import STORE_BACKENDS, AppConfig

logger = logging.getLogger(__name__)


def build_product_store(config: AppConfig) -> Tuple[ProductStore, Optional[CosmosDBClient]]:
    """Create the product store selected by ``config.store.backend``.

    Returns:
        The store and, for the cosmosdb backend, the unconnected CosmosDBClient
        whose lifecycle the caller must manage.

    Raises:
        ValueError: If the backend is unknown.
    """
    backend = config.store.backend
    if backend not in STORE_BACKENDS:
        raise ValueError(
            f"Unknown store backend: {backend!r}. Expected one of {', '.join(STORE_BACKENDS)}"
        )

    if backend == "memory":
        logger.info("Using in-memory product store")
        return InMemoryProductStore(enforce_unique_names=config.store.enforce_unique_names), None

    cosmos = config.cosmosdb
    logger.info(f"Using Cosmos DB product store ({cosmos.database_name}/{cosmos.container_name})")
    client = CosmosDBClient(
        endpoint=cosmos.endpoint,
        key=cosmos.key,
        database_name=cosmos.database_name,
        container_name=cosmos.container_name,
    )
    return CosmosProductStore(client), client
