"""Inbound and outbound product shapes.

ProductRequest carries the syntactic rules for caller input; by the time a
request reaches ProductService these rules have already been checked.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from typing_extensions import Annotated

from product_service.models.product import Product

Price = Annotated[Decimal, Field(gt=0, max_digits=12, decimal_places=2)]


class ProductRequest(BaseModel):
    """Caller-supplied product fields for create and update."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)
    type: str = Field(pattern=r"^[A-Za-z\s]+$")
    price: Price
    quantity: int = Field(default=0, ge=0)

    @field_validator("name", "type")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("price")
    @classmethod
    def _integer_digits(cls, value: Decimal) -> Decimal:
        # at most 10 digits before the decimal point
        if value >= Decimal("1e10"):
            raise ValueError("must be a valid monetary value with up to 10 integer digits")
        return value

    def to_product(self) -> Product:
        """Build a new, not yet persisted Product."""
        return Product(
            name=self.name,
            description=self.description,
            type=self.type,
            price=self.price,
            quantity=self.quantity,
        )


class ProductResult(BaseModel):
    """Projection of a persisted Product returned to callers."""

    id: str
    name: str
    description: Optional[str] = None
    type: str
    price: Decimal
    quantity: int

    @field_serializer("price", when_used="json")
    def _price_as_number(self, price: Decimal) -> float:
        return float(price)

    @classmethod
    def from_product(cls, product: Product) -> "ProductResult":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            type=product.type,
            price=product.price,
            quantity=product.quantity,
        )
