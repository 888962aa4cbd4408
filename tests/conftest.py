"""Shared fixtures for the school API tests."""

import pytest
from fastapi.testclient import TestClient

from fakes import FakeSession
from main import app
from shared.db import get_db


@pytest.fixture
def override_db():
    """Return a function that wires a session into the app and hands back a client."""
    def _override(session: FakeSession) -> TestClient:
        async def _get_db():
            yield session

        app.dependency_overrides[get_db] = _get_db
        return TestClient(app)

    yield _override
    app.dependency_overrides.clear()


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(override_db, session):
    return override_db(session)


@pytest.fixture
def valid_payload() -> dict:
    return {
        "name": "Greenwood High",
        "address": "12 Park Street, Bengaluru",
        "latitude": 12.9716,
        "longitude": 77.5946,
    }
