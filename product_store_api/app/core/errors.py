"""
Error kinds and the global exception handlers.

Services and endpoints raise ``NotFoundError`` or ``ValidationError``;
both carry an HTTP ``status_code``.  ``register_exception_handlers``
installs handlers that turn these, FastAPI's own request validation
errors and ``HTTPException`` into JSON bodies of the form
``{"message": ...}``.  Any other exception that carries an integer
``status_code`` attribute is honoured as-is; everything else becomes a
500 with a generic message and is logged with its traceback.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"
INVALID_PRODUCT_MESSAGE = "Invalid product data"


class ProductStoreError(Exception):
    """Base class for errors that map onto an HTTP status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(ProductStoreError):
    """The requested product does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Product not found"


class ValidationError(ProductStoreError):
    """The request body is not a valid product."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = INVALID_PRODUCT_MESSAGE


def _message_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


async def product_store_error_handler(request: Request, exc: ProductStoreError) -> JSONResponse:
    return _message_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _message_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return _message_response(status.HTTP_400_BAD_REQUEST, INVALID_PRODUCT_MESSAGE)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback for anything not handled above.

    Errors declaring an integer ``status_code`` keep it; the rest are
    logged to stderr and reported as a 500.
    """
    status_code = getattr(exc, "status_code", None)
    if isinstance(status_code, int) and not isinstance(status_code, bool):
        return _message_response(status_code, str(exc))
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _message_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all error handlers to ``app``."""
    app.add_exception_handler(ProductStoreError, product_store_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
