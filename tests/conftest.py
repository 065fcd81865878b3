"""
Shared fixtures.

Every test gets its own ``ProductStore`` and a FastAPI application
built around it, so tests never see each other's products.
"""
import pytest
from fastapi.testclient import TestClient

from product_store_api.app.core.config import settings
from product_store_api.app.core.store import ProductStore
from product_store_api.app.main import create_app
from product_store_api.app.services.product_service import ProductService


TEST_API_KEY = "test-secret-key"


@pytest.fixture(autouse=True)
def api_key(monkeypatch):
    """Pin the shared secret so tests do not depend on the environment."""
    monkeypatch.setattr(settings, "api_key", TEST_API_KEY)
    return TEST_API_KEY


@pytest.fixture
def store() -> ProductStore:
    return ProductStore()


@pytest.fixture
def service(store: ProductStore) -> ProductService:
    return ProductService(store)


@pytest.fixture
def app(store: ProductStore):
    return create_app(store=store)


@pytest.fixture
def auth_headers(api_key):
    return {"x-api-key": api_key}


@pytest.fixture
def test_client(app, auth_headers):
    """TestClient that authenticates every request by default."""
    client = TestClient(app, headers=auth_headers)
    yield client
    client.close()


@pytest.fixture
def anonymous_client(app):
    """TestClient that sends no API key."""
    client = TestClient(app)
    yield client
    client.close()


@pytest.fixture
def product_data():
    """Fixture providing a valid product creation body"""
    return {
        "name": "Widget-1",
        "description": "A small steel widget",
        "price": 9.99,
        "category": "tools",
        "inStock": True,
    }
