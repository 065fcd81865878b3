"""
Unit tests for ProductStoreClient using a mocked requests session.
"""
import json
from unittest.mock import Mock

import pytest
import requests

from product_store_client import ProductStoreClient


def make_response(status_code: int, payload=None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    if payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = b""
    response.url = "http://testserver/api/products"
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def client(session):
    return ProductStoreClient(base_url="http://testserver/", api_key="k", session=session)


class TestProductStoreClient:

    def test_sends_api_key_and_params(self, client, session):
        session.request.return_value = make_response(200, {"total": 0, "page": 2, "limit": 5, "products": []})

        data, error = client.list_products(category="tools", page=2, limit=5)

        assert error is None
        assert data["page"] == 2
        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "http://testserver/api/products"
        assert kwargs["headers"] == {"x-api-key": "k"}
        assert kwargs["params"] == {"category": "tools", "page": 2, "limit": 5}

    def test_create_posts_json(self, client, session):
        body = {"name": "Widget-1", "description": "d", "price": 1, "category": "tools", "inStock": True}
        session.request.return_value = make_response(201, {**body, "id": "abc"})

        data, error = client.create_product(body)

        assert error is None
        assert data["id"] == "abc"
        assert session.request.call_args.kwargs["json"] == body

    def test_update_uses_put_on_product_path(self, client, session):
        session.request.return_value = make_response(200, {"id": "abc", "price": 2})

        client.update_product("abc", {"price": 2})

        kwargs = session.request.call_args.kwargs
        assert kwargs["method"] == "PUT"
        assert kwargs["url"] == "http://testserver/api/products/abc"

    def test_http_error_becomes_error_tuple(self, client, session):
        session.request.return_value = make_response(404, {"message": "Product not found"})

        data, error = client.get_product("missing")

        assert data is None
        assert error == {"status_code": 404, "message": "Product not found"}

    def test_network_error_becomes_error_tuple(self, client, session):
        session.request.side_effect = requests.ConnectionError("refused")

        data, error = client.delete_product("abc")

        assert data is None
        assert error["status_code"] is None
        assert "refused" in error["message"]

    def test_search_returns_empty_list_on_error(self, client, session):
        session.request.return_value = make_response(401, {"message": "Unauthorized: Invalid API key"})

        results, error = client.search_products("widget")

        assert results == []
        assert error["status_code"] == 401

    def test_stats(self, client, session):
        session.request.return_value = make_response(200, {"tools": 3})

        stats, error = client.product_stats()

        assert error is None
        assert stats == {"tools": 3}
        assert session.request.call_args.kwargs["url"] == "http://testserver/api/products/stats"
