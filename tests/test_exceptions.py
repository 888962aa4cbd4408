"""Tests for error envelopes."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from shared.exceptions import (
    NotFoundError,
    StorageError,
    ValidationError,
    format_validation_errors,
    register_exception_handlers,
)


@pytest.fixture
def error_app():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/validation")
    def raise_validation():
        raise ValidationError("latitude: Input should be less than or equal to 90")

    @app.get("/missing")
    def raise_not_found():
        raise NotFoundError("School not found")

    @app.get("/storage")
    def raise_storage():
        raise StorageError(original_error=RuntimeError("password authentication failed"))

    @app.get("/boom")
    def raise_unexpected():
        raise KeyError("internal")

    return app


@pytest.fixture
def error_client(error_app):
    return TestClient(error_app, raise_server_exceptions=False)


@pytest.mark.parametrize("path, status_code, message", [
    ("/validation", 400, "latitude: Input should be less than or equal to 90"),
    ("/missing", 404, "School not found"),
    ("/storage", 500, "Server error"),
    ("/boom", 500, "Server error"),
])
def test_errors_rendered_as_envelope(error_client, path, status_code, message):
    response = error_client.get(path)

    assert response.status_code == status_code
    assert response.json() == {"success": False, "message": message}


def test_method_not_allowed_uses_envelope(error_client):
    response = error_client.post("/validation")

    assert response.status_code == 405
    assert response.json()["success"] is False
    assert response.headers["allow"] == "GET"


def test_format_validation_errors_strips_location_prefix():
    errors = [
        {"loc": ("body", "name"), "msg": "Field required"},
        {"loc": ("body", "address"), "msg": "Field required"},
    ]

    assert format_validation_errors(errors) == "name: Field required"


def test_format_validation_errors_without_field():
    assert format_validation_errors([{"loc": (), "msg": "Input should be a valid dictionary"}]) == \
        "Input should be a valid dictionary"
    assert format_validation_errors([]) == "Invalid request"
