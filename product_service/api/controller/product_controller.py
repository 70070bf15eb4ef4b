"""REST controller for the product catalog."""

import logging
import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Header, Request, Response, status

from product_service.models import ProductRequest, ProductResult
from product_service.services import ProductService

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

router = APIRouter(prefix="/api/v1/products", tags=["products"])


def get_product_service(request: Request) -> ProductService:
    """Resolve the ProductService attached to the running application."""
    return request.app.state.product_service


def get_request_id(
    request: Request,
    response: Response,
    x_request_id: Optional[str] = Header(default=None),
) -> str:
    """Use the caller's X-Request-ID or mint one, and echo it back."""
    request_id = x_request_id or str(uuid.uuid4())
    request.state.request_id = request_id
    response.headers[REQUEST_ID_HEADER] = request_id
    return request_id


@router.get("", response_model=List[ProductResult])
async def get_all_products(
    service: ProductService = Depends(get_product_service),
    request_id: str = Depends(get_request_id),
) -> List[ProductResult]:
    logger.info(f"Getting all products: {request_id}")
    return [product async for product in service.get_all_products(request_id)]


@router.get("/{product_id}", response_model=ProductResult)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
    request_id: str = Depends(get_request_id),
) -> ProductResult:
    logger.info(f"Getting product with ID: {product_id} and requestID: {request_id}")
    return await service.get_product(product_id, request_id)


@router.post("", response_model=ProductResult, status_code=status.HTTP_201_CREATED)
async def add_product(
    payload: ProductRequest,
    service: ProductService = Depends(get_product_service),
    request_id: str = Depends(get_request_id),
) -> ProductResult:
    logger.info(f"Adding product with name: {payload.name} and requestID: {request_id}")
    return await service.add_product(payload, request_id)


@router.put("/{product_id}", response_model=ProductResult)
async def update_product(
    product_id: str,
    payload: ProductRequest,
    service: ProductService = Depends(get_product_service),
    request_id: str = Depends(get_request_id),
) -> ProductResult:
    logger.info(f"Updating product with ID: {product_id} and requestID: {request_id}")
    return await service.update_product(payload, product_id, request_id)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
    request_id: str = Depends(get_request_id),
) -> Response:
    logger.info(f"Deleting product with ID: {product_id} and requestID: {request_id}")
    await service.delete_product(product_id, request_id)
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers={REQUEST_ID_HEADER: request_id},
    )
