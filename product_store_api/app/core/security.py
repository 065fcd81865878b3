"""
Shared‑secret authentication for product routes.

Every ``/api/products`` request must carry an ``x-api-key`` header
equal to ``settings.api_key``.  The check is a FastAPI dependency
attached at router level, so it runs before body validation and
before the endpoint itself; a rejected request never touches the
product store.
"""

import hmac
from typing import Optional

from fastapi import Header, HTTPException, status

from .config import settings


def api_key_matches(candidate: Optional[str], expected: str) -> bool:
    """Compare an API key against the expected value in constant time."""
    if candidate is None:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))


def require_api_key(x_api_key: Optional[str] = Header(None)) -> None:
    """Dependency that rejects requests without a valid ``x-api-key``.

    Raises
    ------
    HTTPException
        401 when the header is missing or does not match.
    """
    if not api_key_matches(x_api_key, settings.api_key):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized: Invalid API key",
        )
