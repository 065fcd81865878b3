"""
Business logic for products.

``ProductService`` implements listing with category filtering and
pagination, lookup by id, name search, per‑category statistics and
the create/update/delete operations on top of a ``ProductStore``.

Lookups return ``None`` when a product does not exist; the endpoint
layer decides how to report that.  All operations are a single pass
over the store snapshot and complete without suspending, so one
request's store access never interleaves with another's.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional

from product_store_api.app.core.config import settings
from product_store_api.app.core.store import ProductStore
from product_store_api.app.schemas.product import Product, ProductCreate, ProductPage, ProductUpdate

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(value: Optional[str], default: int) -> int:
    """Parse the leading integer of a query value.

    Mirrors how browsers and Node parse loose numeric input: leading
    whitespace is skipped, trailing garbage is ignored (``"3abc"`` is
    3), and anything without a leading integer, or a value of zero,
    falls back to ``default``.
    """
    if value is None:
        return default
    match = _LEADING_INT.match(value)
    if not match:
        return default
    return int(match.group(1)) or default


class ProductService:
    """Service for managing products held in a ``ProductStore``."""

    def __init__(self, store: ProductStore) -> None:
        self.store = store

    async def list_products(
        self,
        category: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> ProductPage:
        """Return one page of products, optionally filtered by category.

        - ``category``: exact match; empty or missing means no filter.
        - ``page``/``limit``: raw query values, 1‑indexed page.  Non‑numeric
          values fall back to ``settings.default_page`` and
          ``settings.default_limit``.  There is no upper bound.
        """
        products = self.store.all()
        if category:
            products = [p for p in products if p.category == category]
        page_number = parse_int(page, settings.default_page)
        page_size = parse_int(limit, settings.default_limit)
        start = (page_number - 1) * page_size
        return ProductPage(
            total=len(products),
            page=page_number,
            limit=page_size,
            products=products[start:start + page_size],
        )

    async def get_product(self, product_id: str) -> Optional[Product]:
        return self.store.get(product_id)

    async def search_products(self, name: Optional[str] = None) -> List[Product]:
        """Case‑insensitive substring search on product names.

        An empty or missing ``name`` matches every product.
        """
        needle = (name or "").lower()
        return [p for p in self.store.all() if needle in p.name.lower()]

    async def category_stats(self) -> Dict[str, int]:
        """Count products per category, in order of first appearance."""
        stats: Dict[str, int] = {}
        for product in self.store.all():
            stats[product.category] = stats.get(product.category, 0) + 1
        return stats

    async def create_product(self, data: ProductCreate) -> Product:
        product = Product(id=self.store.new_id(), **data.model_dump(by_alias=True))
        self.store.add(product)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    async def update_product(self, product_id: str, data: ProductUpdate) -> Optional[Product]:
        """Apply a partial update.

        Only fields supplied with a value of the right type replace the
        stored ones; everything else is retained.  Returns ``None`` if
        the product does not exist.
        """
        updated = self.store.update(product_id, data.changes())
        if updated is not None:
            logger.info("Updated product %s", product_id)
        return updated

    async def delete_product(self, product_id: str) -> Optional[Product]:
        """Remove a product and return it, or ``None`` if it does not exist."""
        deleted = self.store.remove(product_id)
        if deleted is not None:
            logger.info("Deleted product %s", product_id)
        return deleted
