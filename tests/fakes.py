"""Store doubles for service and API tests.

RecordingProductStore wraps the in-memory store and counts calls.
FailingProductStore raises on a chosen operation. BlockingProductStore parks
save() until released, so tests can cancel it mid-flight.
"""

import asyncio
from collections import Counter
from typing import AsyncIterator, Optional

from product_service.clients import InMemoryProductStore, ProductStore
from product_service.models import Product


class RecordingProductStore(InMemoryProductStore):

    def __init__(self, enforce_unique_names: bool = False) -> None:
        super().__init__(enforce_unique_names=enforce_unique_names)
        self.calls: Counter = Counter()

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())

    async def exists_by_name(self, name: str) -> bool:
        self.calls["exists_by_name"] += 1
        return await super().exists_by_name(name)

    async def save(self, product: Product) -> Product:
        self.calls["save"] += 1
        return await super().save(product)

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        self.calls["find_by_id"] += 1
        return await super().find_by_id(product_id)

    async def delete(self, product: Product) -> None:
        self.calls["delete"] += 1
        await super().delete(product)

    async def find_all(self) -> AsyncIterator[Product]:
        self.calls["find_all"] += 1
        async for product in super().find_all():
            yield product


class StoreUnavailable(Exception):
    """Stands in for a connectivity error raised by a real store."""


class FailingProductStore(InMemoryProductStore):
    """Raises StoreUnavailable from the operation named in ``fail_on``.

    For find_all, ``fail_after`` products are yielded before the failure.
    """

    def __init__(self, fail_on: str, fail_after: int = 0) -> None:
        super().__init__()
        self.fail_on = fail_on
        self.fail_after = fail_after

    def _maybe_fail(self, operation: str) -> None:
        if operation == self.fail_on:
            raise StoreUnavailable(f"{operation} failed: connection reset")

    async def exists_by_name(self, name: str) -> bool:
        self._maybe_fail("exists_by_name")
        return await super().exists_by_name(name)

    async def save(self, product: Product) -> Product:
        self._maybe_fail("save")
        return await super().save(product)

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        self._maybe_fail("find_by_id")
        return await super().find_by_id(product_id)

    async def delete(self, product: Product) -> None:
        self._maybe_fail("delete")
        await super().delete(product)

    async def find_all(self) -> AsyncIterator[Product]:
        yielded = 0
        async for product in super().find_all():
            if self.fail_on == "find_all" and yielded >= self.fail_after:
                break
            yielded += 1
            yield product
        self._maybe_fail("find_all")


class BlockingProductStore(ProductStore):
    """save() waits until ``release`` is set; nothing is stored before that."""

    def __init__(self) -> None:
        self.inner = InMemoryProductStore()
        self.save_started = asyncio.Event()
        self.release = asyncio.Event()

    async def exists_by_name(self, name: str) -> bool:
        return await self.inner.exists_by_name(name)

    async def save(self, product: Product) -> Product:
        self.save_started.set()
        await self.release.wait()
        return await self.inner.save(product)

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        return await self.inner.find_by_id(product_id)

    async def delete(self, product: Product) -> None:
        await self.inner.delete(product)

    def find_all(self) -> AsyncIterator[Product]:
        return self.inner.find_all()
