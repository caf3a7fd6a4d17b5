"""Product and store data access for the catalog endpoints."""

import uuid
from datetime import datetime, timezone
from typing import Optional

import pandas as pd

from api.services.database import get_db
from src.catalog.listing import Product

PRODUCT_COLUMNS = "id, name, description, mrp, price, category, in_stock, store_id, created_at"


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so they match literally (used with ESCAPE '\\')."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class CatalogService:
    """Service for reading and writing catalog records."""

    def __init__(self):
        self.db = get_db()

    def get_products(
        self,
        search: Optional[str] = None,
    ) -> list[Product]:
        """Load products, optionally narrowed by a text search.

        Returned in insertion order, which is the "featured" order.
        """
        conditions = []
        params = []

        if search:
            conditions.append(
                "(LOWER(name) LIKE ? ESCAPE '\\' "
                "OR LOWER(COALESCE(description, '')) LIKE ? ESCAPE '\\')"
            )
            term = f"%{escape_like(search.lower())}%"
            params.extend([term, term])

        where_clause = " AND ".join(conditions) if conditions else "1=1"
        rows = self.db.fetch_records(
            f"SELECT {PRODUCT_COLUMNS} FROM products WHERE {where_clause} ORDER BY rowid",
            params,
        )
        return [Product.from_record(row) for row in rows]

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a single product by id."""
        rows = self.db.fetch_records(
            f"SELECT {PRODUCT_COLUMNS} FROM products WHERE id = ?",
            [product_id],
        )
        return Product.from_record(rows[0]) if rows else None

    def create_product(
        self,
        name: str,
        price: float,
        category: str,
        description: Optional[str] = None,
        mrp: Optional[float] = None,
        in_stock: bool = True,
        store_id: Optional[str] = None,
    ) -> Product:
        """Insert a new product and return it."""
        product = Product(
            id=str(uuid.uuid4()),
            name=name,
            category=category,
            price=price,
            mrp=mrp,
            description=description,
            in_stock=in_stock,
            store_id=store_id,
            created_at=datetime.now(timezone.utc).replace(tzinfo=None),
        )
        self.db.execute(
            f"INSERT INTO products ({PRODUCT_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
            [
                product.id,
                product.name,
                product.description,
                product.mrp,
                product.price,
                product.category,
                product.in_stock,
                product.store_id,
                product.created_at,
            ],
        )
        return product

    def get_frames(self) -> tuple[pd.DataFrame, pd.DataFrame, pd.DataFrame]:
        """Load stores, orders and products as DataFrames for analytics."""
        stores = self.db.fetch_df("SELECT id, name, status, is_active FROM stores ORDER BY rowid")
        orders = self.db.fetch_df("SELECT id, store_id, total, created_at FROM orders ORDER BY rowid")
        products = self.db.fetch_df("SELECT id, store_id, category FROM products ORDER BY rowid")
        return stores, orders, products
