"""Pytest configuration and fixtures for storefront catalog tests."""

import pytest
import duckdb
import pandas as pd
from datetime import datetime


def create_catalog_db() -> duckdb.DuckDBPyConnection:
    """Create an in-memory DuckDB with the catalog schema and test rows."""
    from api.services.database import SCHEMA_STATEMENTS

    conn = duckdb.connect(":memory:")
    for statement in SCHEMA_STATEMENTS:
        conn.execute(statement)

    conn.execute("""
        INSERT INTO stores (id, name, status, is_active) VALUES
        ('store_1', 'Happy Shop', 'approved', TRUE),
        ('store_2', 'Kitchen Corner', 'approved', TRUE),
        ('store_3', 'Towel Town', 'pending', FALSE)
    """)

    conn.execute("""
        INSERT INTO products (id, name, description, mrp, price, category, in_stock, store_id, created_at) VALUES
        ('prod_1', 'Table Lamp', 'Warm LED desk lamp', 4500, 3200, 'Decoration', TRUE, 'store_1', '2024-03-01 10:00:00'),
        ('prod_2', 'Frying Pan', '28cm non-stick pan', 2800, 1900, 'Kitchen', TRUE, 'store_2', '2024-03-05 09:30:00'),
        ('prod_3', 'Knife Set', 'Five stainless steel knives', 6000, 5100, 'Kitchen', TRUE, 'store_2', '2024-02-20 14:15:00'),
        ('prod_4', 'Bath Towel', 'Large cotton towel', 1500, 950, 'Bath', FALSE, 'store_3', '2024-03-10 16:45:00')
    """)

    conn.execute("""
        INSERT INTO orders (id, user_id, store_id, total, status, created_at) VALUES
        ('order_1', 'user_1', 'store_2', 1900, 'DELIVERED', '2024-03-06 12:00:00'),
        ('order_2', 'user_1', 'store_1', 3200, 'SHIPPED', '2024-03-06 18:30:00'),
        ('order_3', 'user_2', 'store_2', 5100, 'ORDER_PLACED', '2024-03-08 08:10:00')
    """)

    return conn


@pytest.fixture
def test_db():
    """Create in-memory DuckDB for testing."""
    conn = create_catalog_db()
    yield conn
    conn.close()


@pytest.fixture
def sample_products():
    """Sample catalog products in featured order."""
    from src.catalog.listing import Product

    return [
        Product(id="prod_1", name="Table Lamp", category="Decoration", price=3200.0,
                created_at=datetime(2024, 3, 1, 10, 0)),
        Product(id="prod_2", name="Frying Pan", category="Kitchen", price=1900.0,
                created_at=datetime(2024, 3, 5, 9, 30)),
        Product(id="prod_3", name="Knife Set", category="Kitchen", price=5100.0,
                created_at=datetime(2024, 2, 20, 14, 15)),
        Product(id="prod_4", name="Bath Towel", category="Bath", price=950.0,
                created_at=datetime(2024, 3, 10, 16, 45)),
    ]


@pytest.fixture
def sample_stores_df():
    """Sample stores DataFrame."""
    return pd.DataFrame({
        "id": ["store_1", "store_2", "store_3"],
        "name": ["Happy Shop", "Kitchen Corner", "Towel Town"],
        "status": ["approved", "approved", "pending"],
        "is_active": [True, True, False],
    })


@pytest.fixture
def sample_orders_df():
    """Sample orders DataFrame."""
    return pd.DataFrame({
        "id": ["order_1", "order_2", "order_3"],
        "store_id": ["store_2", "store_1", "store_2"],
        "total": [1900.0, 3200.0, 5100.0],
        "created_at": pd.to_datetime([
            "2024-03-06 12:00:00", "2024-03-06 18:30:00", "2024-03-08 08:10:00"
        ]),
    })


@pytest.fixture
def sample_products_df():
    """Sample products DataFrame."""
    return pd.DataFrame({
        "id": ["prod_1", "prod_2", "prod_3", "prod_4"],
        "store_id": ["store_1", "store_2", "store_2", "store_3"],
        "category": ["Decoration", "Kitchen", "Kitchen", "Bath"],
    })


@pytest.fixture(scope="module")
def catalog_connection():
    """Module-scoped catalog database shared by API tests."""
    conn = create_catalog_db()
    yield conn
    conn.close()
