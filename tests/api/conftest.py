"""Test fixtures for API tests."""
import pytest
from fastapi.testclient import TestClient

from app.database import get_db
from app.main import app


@pytest.fixture
def client(engine, db):
    """TestClient whose requests run on the test's `db` session.

    Rows flushed by factories are visible to the endpoints, and endpoint
    commits are visible to the test.
    """
    app.dependency_overrides[get_db] = lambda: db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def create_item(client):
    """Create an inventory item through the API and return its JSON."""
    def _create(name="Rice", quantity=20.0, unit="kg", price=35.0, **extra):
        response = client.post(
            "/inventory",
            json={"name": name, "quantity": quantity, "unit": unit, "price": price, **extra},
        )
        assert response.status_code == 201
        return response.json()
    return _create
