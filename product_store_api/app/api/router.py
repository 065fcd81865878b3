"""
Top‑level API router.

Aggregates the domain routers under a unified prefix.  Product routes
are protected by the shared‑secret ``x-api-key`` check, applied here
so no product endpoint can be added without it.
"""

from fastapi import APIRouter, Depends

from product_store_api.app.core.security import require_api_key

from .endpoints import products

router = APIRouter()

router.include_router(
    products.router,
    prefix="/products",
    tags=["products"],
    dependencies=[Depends(require_api_key)],
)
