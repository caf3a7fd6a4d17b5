"""API services."""

from api.services.database import get_db, DatabaseService
from api.services.catalog import CatalogService

__all__ = ["get_db", "DatabaseService", "CatalogService"]
