"""Maps service failures and request validation errors onto HTTP responses."""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from product_service.api.controller.product_controller import REQUEST_ID_HEADER
from product_service.errors import ErrorKind, ProductServiceError

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.STORE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _request_id_headers(request: Request) -> dict:
    request_id = getattr(request.state, "request_id", None)
    return {REQUEST_ID_HEADER: request_id} if request_id else {}


async def handle_product_service_error(request: Request, exc: ProductServiceError) -> JSONResponse:
    """Render a ProductServiceError as {"error", "timestamp"}."""
    if exc.kind is ErrorKind.STORE_FAILURE:
        # cause was already logged by the service; keep it out of the body
        message = "Internal Server Error"
    else:
        message = exc.message
        logger.info(f"{request.method} {request.url.path} failed with {exc.kind.value}: {exc.message}")

    return JSONResponse(
        status_code=STATUS_BY_KIND[exc.kind],
        content={"error": message, "timestamp": datetime.now(timezone.utc).isoformat()},
        headers=_request_id_headers(request),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as a {field: message} map."""
    errors = {}
    for error in exc.errors():
        location = error.get("loc", ())
        field = str(location[-1]) if location else "body"
        errors[field] = error.get("msg", "Invalid value")

    logger.info(f"{request.method} {request.url.path} rejected: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=errors,
        headers=_request_id_headers(request),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProductServiceError, handle_product_service_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
