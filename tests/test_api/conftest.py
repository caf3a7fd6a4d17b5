"""Pytest fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.services.database import DatabaseService, set_db


@pytest.fixture(scope="module")
def client(catalog_connection):
    """Create a TestClient backed by the in-memory catalog database."""
    set_db(DatabaseService(connection=catalog_connection))
    with TestClient(app) as c:
        yield c
    set_db(None)


@pytest.fixture(scope="module")
def sample_product_id(client):
    """Get a sample product id for testing."""
    response = client.get("/api/products")
    if response.status_code == 200 and response.json().get("products"):
        return response.json()["products"][0]["id"]
    return None
