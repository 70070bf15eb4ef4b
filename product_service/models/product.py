"""Product entity as persisted in the document store."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Product:
    """A catalog product.

    ``id`` is None until the store assigns one on first save; after that it
    never changes.
    """

    name: str
    type: str
    price: Decimal
    quantity: int = 0
    description: Optional[str] = None
    id: Optional[str] = None  # assigned by the store
