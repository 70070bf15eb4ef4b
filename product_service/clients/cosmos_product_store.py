"""ProductStore backed by an Azure Cosmos DB container.

Each product is one document partitioned on its own id, so point reads and
deletes never fan out. Price is stored as a string to keep its exact decimal
value.
"""

import logging
import uuid
from decimal import Decimal
from typing import Any, AsyncIterator, Optional

from azure.cosmos.exceptions import CosmosResourceNotFoundError

from product_service.clients.cosmosdb_client import CosmosDBClient
from product_service.clients.product_store import ProductStore
from product_service.errors import ProductMissingError
from product_service.models import Product

logger = logging.getLogger(__name__)

EXISTS_BY_NAME_QUERY = "SELECT TOP 1 c.id FROM c WHERE c.name = @name"
FIND_ALL_QUERY = "SELECT * FROM c"


def product_to_document(product: Product) -> dict[str, Any]:
    """Serialize a product into a Cosmos DB document."""
    return {
        "id": product.id,
        "name": product.name,
        "description": product.description,
        "type": product.type,
        "price": str(product.price),
        "quantity": product.quantity,
    }


def document_to_product(document: dict[str, Any]) -> Product:
    """Build a product from a stored document, ignoring Cosmos system fields."""
    return Product(
        id=document["id"],
        name=document["name"],
        description=document.get("description"),
        type=document["type"],
        price=Decimal(document["price"]),
        quantity=int(document.get("quantity", 0)),
    )


class CosmosProductStore(ProductStore):
    """ProductStore on top of a connected CosmosDBClient.

    The client's lifecycle (connect/close) is owned by the caller.
    """

    def __init__(self, client: CosmosDBClient):
        self._client = client

    async def exists_by_name(self, name: str) -> bool:
        matches = await self._client.query_items(
            EXISTS_BY_NAME_QUERY,
            parameters=[{"name": "@name", "value": name}],
        )
        return len(matches) > 0

    async def save(self, product: Product) -> Product:
        document = product_to_document(product)
        if product.id is None:
            document["id"] = str(uuid.uuid4())
            stored = await self._client.create_item(document)
        else:
            try:
                stored = await self._client.replace_item(document)
            except CosmosResourceNotFoundError as e:
                raise ProductMissingError(f"Product not found with ID: {product.id}") from e
        logger.debug(f"Saved product document {stored['id']}")
        return document_to_product(stored)

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        document = await self._client.read_item_or_none(product_id, partition_key=product_id)
        if document is None:
            return None
        return document_to_product(document)

    async def delete(self, product: Product) -> None:
        try:
            await self._client.delete_item(product.id, partition_key=product.id)
        except CosmosResourceNotFoundError as e:
            raise ProductMissingError(f"Product not found with ID: {product.id}") from e

    async def find_all(self) -> AsyncIterator[Product]:
        async for document in self._client.iter_items(FIND_ALL_QUERY):
            yield document_to_product(document)
