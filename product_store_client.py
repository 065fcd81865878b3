"""Product Store API client.

This module defines a small client wrapper around the Product Store
HTTP API.  The client uses the ``requests`` library internally and
sends the shared secret in the ``x-api-key`` header of every request.

The client exposes one method per API operation:

* :meth:`list_products` – one page of products, optionally filtered.
* :meth:`get_product` – fetch a single product by its identifier.
* :meth:`search_products` – case‑insensitive name search.
* :meth:`product_stats` – product counts per category.
* :meth:`create_product` – create a product.
* :meth:`update_product` – partially update a product.
* :meth:`delete_product` – delete a product.

No method raises on HTTP or network failures.  Each returns a tuple
``(data, error)``: on success ``error`` is ``None``; on failure
``data`` is ``None`` and ``error`` is a dictionary with keys
``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]

PRODUCTS_PATH = "/api/products"


class ProductStoreClient:
    """Client for interacting with the Product Store API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            api_key: Shared secret sent as ``x-api-key``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/api/products``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers = {"x-api-key": self.api_key}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("message", "")
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _product_path(product_id: str) -> str:
        return f"{PRODUCTS_PATH}/{product_id}"

    # ------------------------------------------------------------------
    # Product operations
    # ------------------------------------------------------------------
    def list_products(
        self,
        *,
        category: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve one page of products.

        Returns:
            A tuple ``(page, error)`` where ``page`` has the keys
            ``total``, ``page``, ``limit`` and ``products``.
        """
        params = {
            key: value
            for key, value in (("category", category), ("page", page), ("limit", limit))
            if value is not None
        }
        return self._request("GET", PRODUCTS_PATH, params=params or None)

    def get_product(self, product_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", self._product_path(product_id))

    def search_products(self, name: str = "") -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Search products by name.

        Returns:
            A tuple ``(products, error)``. ``products`` is empty on failure.
        """
        data, error = self._request("GET", f"{PRODUCTS_PATH}/search", params={"name": name})
        if error:
            return [], error
        return data or [], None

    def product_stats(self) -> Tuple[Dict[str, int], Optional[ApiError]]:
        data, error = self._request("GET", f"{PRODUCTS_PATH}/stats")
        if error:
            return {}, error
        return data or {}, None

    def create_product(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a product.

        Args:
            payload: ``name``, ``description``, ``price``, ``category``
                and ``inStock``.
        """
        return self._request("POST", PRODUCTS_PATH, json_body=payload)

    def update_product(
        self, product_id: str, changes: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Update a product.  Fields absent from ``changes`` are kept."""
        return self._request("PUT", self._product_path(product_id), json_body=changes)

    def delete_product(self, product_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Delete a product and return the deleted record."""
        return self._request("DELETE", self._product_path(product_id))
