"""API controllers."""

from product_service.api.controller.product_controller import router as product_router

__all__ = ["product_router"]
