"""Client modules for product persistence."""

from product_service.clients.product_store import ProductStore
from product_service.clients.memory_product_store import InMemoryProductStore
from product_service.clients.cosmosdb_client import CosmosDBClient
from product_service.clients.cosmos_product_store import CosmosProductStore
from product_service.clients.store_factory import build_product_store

__all__ = [
    "ProductStore",
    "InMemoryProductStore",
    "CosmosDBClient",
    "CosmosProductStore",
    "build_product_store",
]
