"""Product lifecycle service.

Enforces the catalog's business rules around create, update, delete, get and
list:
- Product names are unique at creation time (check against the store, then insert)
- Update, delete and get require the product to exist
- Malformed requests are rejected before the store is touched

Every failure leaves as a ProductServiceError. Store failures are never
retried or swallowed, and cancellation of a pending store call propagates
unchanged.
"""

import logging
from typing import AsyncIterator, Awaitable, Optional, TypeVar

from product_service.clients import ProductStore
from product_service.errors import ProductConflictError, ProductMissingError, ProductServiceError
from product_service.models import Product, ProductRequest, ProductResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _is_blank(product_id: Optional[str]) -> bool:
    return product_id is None or not product_id.strip()


class ProductService:
    """Orchestrates product operations against a ProductStore.

    Holds no per-call state and takes no locks; concurrent calls are only as
    consistent as the store makes them. ``request_id`` is a caller-supplied
    correlation token used for logging only.
    """

    def __init__(self, store: ProductStore):
        self._store = store

    async def _call_store(self, action: str, call: Awaitable[T]) -> T:
        """Await a store call, classifying anything it raises."""
        try:
            return await call
        except ProductServiceError:
            raise
        except ProductConflictError as e:
            logger.warning(f"Store rejected write while {action}: {e}")
            raise ProductServiceError.already_exists("Product already exists", cause=e) from e
        except ProductMissingError as e:
            logger.warning(f"Product vanished while {action}: {e}")
            raise ProductServiceError.not_found(str(e)) from e
        except Exception as e:
            logger.error(f"Store failure while {action}: {e}", exc_info=True)
            raise ProductServiceError.store_failure(f"Store failure while {action}", e) from e

    async def _find_existing(self, product_id: str) -> Product:
        product = await self._call_store(
            f"looking up product {product_id}", self._store.find_by_id(product_id)
        )
        if product is None:
            logger.warning(f"Product not found with ID: {product_id}")
            raise ProductServiceError.not_found(f"Product not found with ID: {product_id}")
        return product

    async def add_product(
        self, request: Optional[ProductRequest], request_id: Optional[str] = None
    ) -> ProductResult:
        """Create a product unless one with the same name already exists.

        Args:
            request: The product fields. Must not be None.
            request_id: Correlation token for logging.

        Returns:
            The persisted product, including its store-assigned id.

        Raises:
            ProductServiceError: INVALID_ARGUMENT for a missing request,
                ALREADY_EXISTS for a taken name, STORE_FAILURE otherwise.
        """
        if request is None:
            raise ProductServiceError.invalid_argument("Product request cannot be null")

        logger.info(f"Adding product with name: {request.name} Request ID: {request_id}")

        exists = await self._call_store(
            f"checking name {request.name!r}", self._store.exists_by_name(request.name)
        )
        if exists:
            logger.warning(f"Product already exists with name: {request.name} Request ID: {request_id}")
            raise ProductServiceError.already_exists("Product already exists")

        saved = await self._call_store(
            f"saving product {request.name!r}", self._store.save(request.to_product())
        )
        logger.info(f"Successfully added product with ID: {saved.id} Request ID: {request_id}")
        return ProductResult.from_product(saved)

    async def update_product(
        self,
        request: Optional[ProductRequest],
        product_id: Optional[str],
        request_id: Optional[str] = None,
    ) -> ProductResult:
        """Replace every mutable field of an existing product.

        The id is kept. Name uniqueness is not re-checked.

        Raises:
            ProductServiceError: INVALID_ARGUMENT, NOT_FOUND or STORE_FAILURE.
        """
        if request is None:
            raise ProductServiceError.invalid_argument("Product request cannot be null")
        if _is_blank(product_id):
            raise ProductServiceError.invalid_argument("Invalid product ID")

        logger.info(f"Updating product with ID: {product_id} Request ID: {request_id}")

        existing = await self._find_existing(product_id)
        existing.name = request.name
        existing.description = request.description
        existing.type = request.type
        existing.price = request.price
        existing.quantity = request.quantity

        updated = await self._call_store(f"saving product {product_id}", self._store.save(existing))
        logger.info(f"Successfully updated product with ID: {updated.id} Request ID: {request_id}")
        return ProductResult.from_product(updated)

    async def delete_product(self, product_id: Optional[str], request_id: Optional[str] = None) -> None:
        """Permanently remove a product.

        Raises:
            ProductServiceError: INVALID_ARGUMENT, NOT_FOUND or STORE_FAILURE.
        """
        if _is_blank(product_id):
            raise ProductServiceError.invalid_argument("Invalid product ID")

        logger.info(f"Deleting product with ID: {product_id} Request ID: {request_id}")

        existing = await self._find_existing(product_id)
        await self._call_store(f"deleting product {product_id}", self._store.delete(existing))
        logger.info(f"Successfully deleted product with ID: {product_id} Request ID: {request_id}")

    async def get_product(self, product_id: Optional[str], request_id: Optional[str] = None) -> ProductResult:
        """Fetch one product by id.

        Raises:
            ProductServiceError: INVALID_ARGUMENT, NOT_FOUND or STORE_FAILURE.
        """
        if _is_blank(product_id):
            raise ProductServiceError.invalid_argument("Product ID cannot be null or empty")

        logger.info(f"Searching for product with ID: {product_id} Request ID: {request_id}")

        product = await self._find_existing(product_id)
        logger.info(f"Successfully retrieved product with ID: {product_id} Request ID: {request_id}")
        return ProductResult.from_product(product)

    async def get_all_products(self, request_id: Optional[str] = None) -> AsyncIterator[ProductResult]:
        """Stream every product in store order.

        An empty store yields nothing. A store failure part-way through is
        raised as STORE_FAILURE after the items already yielded.
        """
        logger.info(f"Retrieving all products Request ID: {request_id}")

        count = 0
        try:
            async for product in self._store.find_all():
                count += 1
                yield ProductResult.from_product(product)
        except Exception as e:
            logger.error(f"Store failure while listing products: {e}", exc_info=True)
            raise ProductServiceError.store_failure("Store failure while listing products", e) from e

        logger.info(f"Retrieved {count} products Request ID: {request_id}")
