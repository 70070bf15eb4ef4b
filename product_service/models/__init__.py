"""Data models module."""

from product_service.models.product import Product
from product_service.models.product_dto import ProductRequest, ProductResult

__all__ = ["Product", "ProductRequest", "ProductResult"]
