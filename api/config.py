"""FastAPI application settings."""

from pathlib import Path
from pydantic_settings import BaseSettings
from functools import lru_cache
import os


def _parse_cors_origins() -> list[str]:
    """Parse CORS origins from environment variable."""
    cors_env = os.getenv("STOREFRONT_CORS_ORIGINS", "")
    if cors_env:
        return [origin.strip() for origin in cors_env.split(",")]
    # Default development origins
    return ["http://localhost:3000", "http://localhost:5173"]


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # App info
    app_name: str = "Storefront Catalog API"
    version: str = "1.0.0"
    debug: bool = os.getenv("STOREFRONT_DEBUG", "false").lower() == "true"

    # Database
    database_path: Path = Path(
        os.getenv("STOREFRONT_DB_PATH", str(Path(__file__).parent.parent / "data" / "storefront.duckdb"))
    )

    # CORS - configurable via environment variable
    cors_origins: list[str] = _parse_cors_origins()

    # Display
    currency: str = os.getenv("STOREFRONT_CURRENCY", "KSH")

    # Logging
    log_level: str = os.getenv("STOREFRONT_LOG_LEVEL", "INFO")

    class Config:
        env_prefix = "STOREFRONT_"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
