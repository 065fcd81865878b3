"""
Tests for the application plumbing: request logging, error mapping and
API-key comparison.
"""
import logging
import re

import pytest
from fastapi.testclient import TestClient

from product_store_api.app.core.errors import NotFoundError, ValidationError
from product_store_api.app.core.logging_config import ACCESS_LOGGER_NAME, AccessLogFormatter, get_access_logger
from product_store_api.app.core.security import api_key_matches
from product_store_api.app.main import create_app


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def access_records():
    logger = get_access_logger()
    handler = ListHandler()
    logger.addHandler(handler)
    yield handler.records
    logger.removeHandler(handler)


class TeapotError(Exception):
    status_code = 418


@pytest.fixture
def failing_app(store):
    app = create_app(store=store)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    @app.get("/teapot")
    async def teapot():
        raise TeapotError("short and stout")

    @app.get("/missing")
    async def missing():
        raise NotFoundError()

    @app.get("/invalid")
    async def invalid():
        raise ValidationError()

    return app


class TestRequestLogging:

    def test_every_request_is_logged_before_auth(self, anonymous_client, access_records):
        anonymous_client.get("/api/products", params={"page": 2})

        messages = [record.getMessage() for record in access_records]
        assert messages == ["GET /api/products?page=2"]

    def test_access_logger_does_not_propagate(self):
        logger = get_access_logger()

        assert logger.name == ACCESS_LOGGER_NAME
        assert logger.propagate is False

    def test_access_log_line_format(self):
        formatter = AccessLogFormatter(fmt="[%(asctime)s] %(message)s")
        record = logging.LogRecord(ACCESS_LOGGER_NAME, logging.INFO, __file__, 1, "POST /api/products", None, None)
        record.created = 0.5

        assert formatter.format(record) == "[1970-01-01T00:00:00.500Z] POST /api/products"

    def test_timestamp_is_iso_8601_utc(self):
        formatter = AccessLogFormatter(fmt="[%(asctime)s] %(message)s")
        record = logging.LogRecord(ACCESS_LOGGER_NAME, logging.INFO, __file__, 1, "GET /", None, None)

        line = formatter.format(record)

        assert re.fullmatch(r"\[\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z\] GET /", line)


class TestErrorHandling:

    @pytest.fixture
    def client(self, failing_app):
        client = TestClient(failing_app, raise_server_exceptions=False)
        yield client
        client.close()

    def test_not_found_error_maps_to_404(self, client):
        response = client.get("/missing")

        assert response.status_code == 404
        assert response.json() == {"message": "Product not found"}

    def test_validation_error_maps_to_400(self, client):
        response = client.get("/invalid")

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid product data"}

    def test_declared_status_code_is_honoured(self, client):
        response = client.get("/teapot")

        assert response.status_code == 418
        assert response.json() == {"message": "short and stout"}

    def test_unexpected_error_is_generic_500(self, client, caplog):
        with caplog.at_level(logging.ERROR):
            response = client.get("/boom")

        assert response.status_code == 500
        assert response.json() == {"message": "Internal Server Error"}
        assert "secret internals" not in response.text
        assert any("Unhandled error" in record.getMessage() for record in caplog.records)

    def test_unknown_route_uses_message_body(self, client):
        response = client.get("/nowhere")

        assert response.status_code == 404
        assert response.json() == {"message": "Not Found"}

    def test_custom_message_is_kept(self):
        assert NotFoundError("Gone").message == "Gone"
        assert NotFoundError().status_code == 404
        assert ValidationError().status_code == 400


class TestApiKeyComparison:

    def test_matching_key(self):
        assert api_key_matches("abc", "abc")

    def test_mismatching_key(self):
        assert not api_key_matches("abd", "abc")

    def test_missing_key(self):
        assert not api_key_matches(None, "abc")
