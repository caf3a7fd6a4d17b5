"""Database connection service for FastAPI."""

import duckdb
from typing import Optional
from pathlib import Path

from api.config import get_settings
from config.logging_config import get_logger

logger = get_logger("database")

SCHEMA_STATEMENTS = [
    """
    CREATE TABLE IF NOT EXISTS stores (
        id VARCHAR PRIMARY KEY,
        name VARCHAR NOT NULL,
        status VARCHAR DEFAULT 'pending',
        is_active BOOLEAN DEFAULT FALSE,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS products (
        id VARCHAR PRIMARY KEY,
        name VARCHAR NOT NULL,
        description VARCHAR,
        mrp DOUBLE,
        price DOUBLE NOT NULL,
        category VARCHAR NOT NULL,
        in_stock BOOLEAN DEFAULT TRUE,
        store_id VARCHAR,
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS orders (
        id VARCHAR PRIMARY KEY,
        user_id VARCHAR,
        store_id VARCHAR,
        total DOUBLE NOT NULL,
        status VARCHAR DEFAULT 'ORDER_PLACED',
        created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
]


class DatabaseService:
    """Manages the DuckDB connection for FastAPI."""

    def __init__(
        self,
        db_path: Optional[Path] = None,
        connection: Optional[duckdb.DuckDBPyConnection] = None,
    ):
        """Initialize database service.

        Args:
            db_path: Path to database file.
            connection: Existing connection to use instead of opening db_path.
        """
        settings = get_settings()
        self.db_path = db_path or settings.database_path
        self._connection = connection

    def connect(self) -> duckdb.DuckDBPyConnection:
        """Get or create database connection."""
        if self._connection is None:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._connection = duckdb.connect(str(self.db_path))
            logger.info(f"Connected to {self.db_path}")
        return self._connection

    def ensure_schema(self) -> None:
        """Create the catalog tables if they don't exist."""
        conn = self.connect()
        for statement in SCHEMA_STATEMENTS:
            conn.execute(statement)

    def execute(self, query: str, params: Optional[list] = None):
        """Execute a query and return results."""
        conn = self.connect()
        if params:
            return conn.execute(query, params)
        return conn.execute(query)

    def fetch_one(self, query: str, params: Optional[list] = None):
        """Execute query and fetch one result."""
        return self.execute(query, params).fetchone()

    def fetch_records(self, query: str, params: Optional[list] = None) -> list[dict]:
        """Execute query and return rows as dictionaries keyed by column name."""
        cursor = self.execute(query, params)
        columns = [col[0] for col in cursor.description]
        return [dict(zip(columns, row)) for row in cursor.fetchall()]

    def fetch_df(self, query: str, params: Optional[list] = None):
        """Execute query and return as DataFrame."""
        return self.execute(query, params).df()

    def close(self) -> None:
        """Close the database connection."""
        if self._connection:
            self._connection.close()
            self._connection = None


# Global database instance
_db_service: Optional[DatabaseService] = None


def get_db() -> DatabaseService:
    """Get global database service instance."""
    global _db_service
    if _db_service is None:
        _db_service = DatabaseService()
        _db_service.ensure_schema()
    return _db_service


def set_db(service: Optional[DatabaseService]) -> None:
    """Replace the global database service (used by tests)."""
    global _db_service
    _db_service = service
