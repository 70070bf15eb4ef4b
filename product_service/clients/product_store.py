"""Persistence contract consumed by ProductService."""

from abc import ABC, abstractmethod
from typing import AsyncIterator, Optional

from product_service.models import Product


class ProductStore(ABC):
    """Async CRUD access to products keyed by string id.

    Implementations raise ProductConflictError when a storage-level
    uniqueness constraint rejects a save, and ProductMissingError when a
    replace or delete targets an id that is no longer stored. Any other
    exception is treated by the service as a store failure.
    """

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool:
        """Return True if any product has exactly this name."""

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """Insert when ``product.id`` is None, otherwise replace the stored product.

        Returns the persisted product, with its id set.
        """

    @abstractmethod
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """Return the product with this id, or None if not found."""

    @abstractmethod
    async def delete(self, product: Product) -> None:
        """Remove the product permanently."""

    @abstractmethod
    def find_all(self) -> AsyncIterator[Product]:
        """Stream every stored product in store order."""
