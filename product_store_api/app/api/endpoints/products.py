"""
Product endpoints.

These routes provide CRUD operations on products, a paginated and
filterable listing, a case‑insensitive name search and per‑category
counts.  Every route requires the ``x-api-key`` header (enforced by
the parent router).

``/search`` and ``/stats`` are declared before ``/{product_id}`` so
they are not captured as product ids.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from product_store_api.app.api.deps import get_product_service
from product_store_api.app.core.errors import NotFoundError
from product_store_api.app.schemas.product import Product, ProductCreate, ProductPage, ProductUpdate
from product_store_api.app.services.product_service import ProductService

router = APIRouter()


@router.get("", response_model=ProductPage)
async def list_products(
    category: Optional[str] = Query(None, description="Only return products in this category"),
    page: Optional[str] = Query(None, description="1‑indexed page number (default 1)"),
    limit: Optional[str] = Query(None, description="Page size (default 10)"),
    service: ProductService = Depends(get_product_service),
) -> ProductPage:
    """List products with optional category filter and pagination.

    Non‑numeric ``page`` or ``limit`` values silently fall back to
    their defaults.
    """
    return await service.list_products(category=category, page=page, limit=limit)


@router.get("/search", response_model=List[Product])
async def search_products(
    name: Optional[str] = Query(None, description="Case‑insensitive substring of the product name"),
    service: ProductService = Depends(get_product_service),
) -> List[Product]:
    """Search products by name.  An empty query returns every product."""
    return await service.search_products(name)


@router.get("/stats", response_model=Dict[str, int])
async def product_stats(service: ProductService = Depends(get_product_service)) -> Dict[str, int]:
    """Return the number of products per category."""
    return await service.category_stats()


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str, service: ProductService = Depends(get_product_service)) -> Product:
    """Retrieve a single product by its ID.  Raises 404 if it does not exist."""
    product = await service.get_product(product_id)
    if product is None:
        raise NotFoundError()
    return product


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_in: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a product.

    All of ``name``, ``description``, ``price``, ``category`` and
    ``inStock`` are required with their exact JSON types; anything
    else is answered with 400.
    """
    return await service.create_product(product_in)


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    body: Any = Body(None),
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Update an existing product.

    Despite the verb this is a partial update: only fields supplied
    with a correctly typed value are changed, all others are kept.  A
    missing or non‑object body changes nothing.
    """
    product = await service.update_product(product_id, ProductUpdate.from_body(body))
    if product is None:
        raise NotFoundError()
    return product


@router.delete("/{product_id}", response_model=Product)
async def delete_product(product_id: str, service: ProductService = Depends(get_product_service)) -> Product:
    """Delete a product and return the removed record."""
    product = await service.delete_product(product_id)
    if product is None:
        raise NotFoundError()
    return product
