"""
In‑memory product storage.

``ProductStore`` owns the ordered product collection for one
application instance.  Records keep their insertion order; removing a
record does not reorder the others and updating one keeps it at the
same position.

All access goes through a single re‑entrant lock.  FastAPI runs the
async endpoints on one event loop, so requests do not interleave
anyway, but the lock keeps every read‑then‑write atomic if the store
is ever used from worker threads.
"""

import threading
import uuid
from typing import Any, Dict, List, Optional, Set

from product_store_api.app.schemas.product import Product


class ProductStore:
    """Ordered, lock‑guarded collection of ``Product`` records."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._products: List[Product] = []
        # Every id ever handed out, so deleted ids are never reissued.
        self._issued_ids: Set[str] = set()

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def new_id(self) -> str:
        """Reserve and return an id that has never been used by this store."""
        with self._lock:
            while True:
                candidate = str(uuid.uuid4())
                if candidate not in self._issued_ids:
                    self._issued_ids.add(candidate)
                    return candidate

    def all(self) -> List[Product]:
        """Return a snapshot of all products in insertion order."""
        with self._lock:
            return list(self._products)

    def get(self, product_id: str) -> Optional[Product]:
        with self._lock:
            index = self._index_of(product_id)
            return None if index is None else self._products[index]

    def add(self, product: Product) -> Product:
        with self._lock:
            self._issued_ids.add(product.id)
            self._products.append(product)
            return product

    def update(self, product_id: str, changes: Dict[str, Any]) -> Optional[Product]:
        """Replace the record in place with a copy carrying ``changes``.

        ``id`` can not be changed.  Returns the new record, or ``None``
        when no product has ``product_id``.
        """
        changes = {key: value for key, value in changes.items() if key != "id"}
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            updated = self._products[index].model_copy(update=changes)
            self._products[index] = updated
            return updated

    def remove(self, product_id: str) -> Optional[Product]:
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            return self._products.pop(index)

    def _index_of(self, product_id: str) -> Optional[int]:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None
