"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from product_store_api.app.core.store import ProductStore
from product_store_api.app.services.product_service import ProductService


def get_store(request: Request) -> ProductStore:
    """Return the store owned by the running application."""
    return request.app.state.store


def get_product_service(request: Request) -> ProductService:
    return ProductService(get_store(request))
