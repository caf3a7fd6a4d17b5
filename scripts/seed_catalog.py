#!/usr/bin/env python
"""
Seed the storefront catalog database.

Creates the stores, products and orders tables and loads either CSV files
from a seed directory (stores.csv, products.csv, orders.csv) or a small
built-in sample catalog.

Usage:
    python scripts/seed_catalog.py [options]

Options:
    --seed-dir PATH     Directory holding the seed CSV files
    --db PATH           Custom database path
    --reset             Delete existing rows before loading
"""

import argparse
import sys
from pathlib import Path

import pandas as pd

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import setup_logging, get_logger
from api.services.database import DatabaseService

logger = get_logger("seed")

TABLES = ("stores", "products", "orders")

SAMPLE_STORES = pd.DataFrame([
    {"id": "store_1", "name": "Happy Shop", "status": "approved", "is_active": True},
    {"id": "store_2", "name": "Kitchen Corner", "status": "approved", "is_active": True},
    {"id": "store_3", "name": "Bath & Beyond Nairobi", "status": "pending", "is_active": False},
])

SAMPLE_PRODUCTS = pd.DataFrame([
    {"id": "prod_1", "name": "Modern Table Lamp", "description": "Warm LED desk lamp",
     "mrp": 4500.0, "price": 3200.0, "category": "Decoration", "in_stock": True,
     "store_id": "store_1", "created_at": "2024-03-01 10:00:00"},
    {"id": "prod_2", "name": "Non-stick Frying Pan", "description": "28cm aluminium pan",
     "mrp": 2800.0, "price": 1900.0, "category": "Kitchen", "in_stock": True,
     "store_id": "store_2", "created_at": "2024-03-05 09:30:00"},
    {"id": "prod_3", "name": "Chef Knife Set", "description": "Five stainless steel knives",
     "mrp": 6000.0, "price": 5100.0, "category": "Kitchen", "in_stock": True,
     "store_id": "store_2", "created_at": "2024-02-20 14:15:00"},
    {"id": "prod_4", "name": "Cotton Bath Towel", "description": "Large bath towel",
     "mrp": 1500.0, "price": 950.0, "category": "Bath", "in_stock": False,
     "store_id": "store_3", "created_at": "2024-03-10 16:45:00"},
])

SAMPLE_ORDERS = pd.DataFrame([
    {"id": "order_1", "user_id": "user_1", "store_id": "store_2", "total": 1900.0,
     "status": "DELIVERED", "created_at": "2024-03-06 12:00:00"},
    {"id": "order_2", "user_id": "user_1", "store_id": "store_1", "total": 3200.0,
     "status": "SHIPPED", "created_at": "2024-03-06 18:30:00"},
    {"id": "order_3", "user_id": "user_2", "store_id": "store_2", "total": 5100.0,
     "status": "ORDER_PLACED", "created_at": "2024-03-08 08:10:00"},
])


def load_frames(seed_dir: Path | None) -> dict[str, pd.DataFrame]:
    """Load seed DataFrames from CSV files, falling back to the sample catalog."""
    frames = {"stores": SAMPLE_STORES, "products": SAMPLE_PRODUCTS, "orders": SAMPLE_ORDERS}
    if seed_dir is None:
        return frames

    for table in TABLES:
        csv_path = seed_dir / f"{table}.csv"
        if csv_path.exists():
            frames[table] = pd.read_csv(csv_path)
            logger.info(f"Read {len(frames[table])} rows from {csv_path}")
        else:
            logger.warning(f"{csv_path} not found, using sample {table}")
    return frames


def seed(db: DatabaseService, frames: dict[str, pd.DataFrame], reset: bool = False) -> dict[str, int]:
    """Insert seed frames into the database.

    All tables are loaded in one transaction; on failure nothing is kept,
    including rows deleted by ``reset``.

    Returns:
        Row count per table after loading.
    """
    db.ensure_schema()
    conn = db.connect()

    counts = {}
    conn.execute("BEGIN TRANSACTION")
    try:
        for table in TABLES:
            if reset:
                conn.execute(f"DELETE FROM {table}")

            df = frames[table]
            if "created_at" in df.columns:
                df = df.assign(created_at=pd.to_datetime(df["created_at"]))
            columns = ", ".join(df.columns)
            conn.register("seed_df", df)
            try:
                conn.execute(f"INSERT INTO {table} ({columns}) SELECT {columns} FROM seed_df")
            finally:
                conn.unregister("seed_df")

            counts[table] = conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
            logger.info(f"{table}: {counts[table]} rows")
    except Exception as e:
        conn.execute("ROLLBACK")
        logger.warning(f"Rolled back seed due to error: {e}")
        raise

    conn.execute("COMMIT")
    return counts


def main():
    """Main entry point for seeding the catalog."""
    parser = argparse.ArgumentParser(
        description="Seed the storefront catalog database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--seed-dir",
        type=Path,
        default=None,
        help="Directory with stores.csv, products.csv and orders.csv",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=config.database.path,
        help="Database path",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete existing rows before loading",
    )
    args = parser.parse_args()

    setup_logging(config.app.log_level)

    db = DatabaseService(db_path=args.db)
    try:
        counts = seed(db, load_frames(args.seed_dir), reset=args.reset)
    finally:
        db.close()

    print(f"Seeded {args.db}: " + ", ".join(f"{t}={n}" for t, n in counts.items()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
