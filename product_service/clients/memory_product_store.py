"""In-memory product store for local development and tests."""

import asyncio
import logging
import uuid
from dataclasses import replace
from typing import AsyncIterator, Dict, Optional

from product_service.errors import ProductConflictError, ProductMissingError
from product_service.models import Product
from product_service.clients.product_store import ProductStore

logger = logging.getLogger(__name__)


class InMemoryProductStore(ProductStore):
    """Dict-backed ProductStore.

    Products are copied on the way in and out so callers never share state
    with the store. Every call yields to the event loop once, like a network
    round trip would, so concurrent callers interleave.
    """

    def __init__(self, enforce_unique_names: bool = False):
        """Initialize an empty store.

        Args:
            enforce_unique_names: Reject saves that would give two products
                the same name, raising ProductConflictError.
        """
        self._products: Dict[str, Product] = {}
        self._enforce_unique_names = enforce_unique_names

    async def exists_by_name(self, name: str) -> bool:
        await asyncio.sleep(0)
        return any(p.name == name for p in self._products.values())

    async def save(self, product: Product) -> Product:
        await asyncio.sleep(0)
        stored = replace(product)
        if stored.id is None:
            stored.id = uuid.uuid4().hex
        elif stored.id not in self._products:
            raise ProductMissingError(f"Product not found with ID: {stored.id}")

        if self._enforce_unique_names and any(
            p.name == stored.name and p.id != stored.id for p in self._products.values()
        ):
            raise ProductConflictError(f"Product name already taken: {stored.name}")

        self._products[stored.id] = stored
        logger.debug(f"Stored product {stored.id}")
        return replace(stored)

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        await asyncio.sleep(0)
        product = self._products.get(product_id)
        return replace(product) if product is not None else None

    async def delete(self, product: Product) -> None:
        await asyncio.sleep(0)
        if self._products.pop(product.id, None) is None:
            raise ProductMissingError(f"Product not found with ID: {product.id}")

    async def find_all(self) -> AsyncIterator[Product]:
        for product in list(self._products.values()):
            await asyncio.sleep(0)
            yield replace(product)

    def __len__(self) -> int:
        """Number of stored products, for inspection."""
        return len(self._products)
