"""Configuration module for the storefront catalog service.

Filter defaults are empty: no category or price bound is applied unless the
query string asks for it.
"""

from .settings import config, DatabaseConfig, AppConfig, Config
from .constants import (
    # Filter keys recognized by the query codec
    FILTER_KEYS,
    # Sorting
    SORT_OPTIONS,
    SORT_KEYS,
    DEFAULT_SORT,
    # Display
    DEFAULT_CURRENCY,
    # Helper functions
    get_sort_label,
    is_valid_sort,
)

__all__ = [
    "config",
    "DatabaseConfig",
    "AppConfig",
    "Config",
    "FILTER_KEYS",
    "SORT_OPTIONS",
    "SORT_KEYS",
    "DEFAULT_SORT",
    "DEFAULT_CURRENCY",
    "get_sort_label",
    "is_valid_sort",
]
