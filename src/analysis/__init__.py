"""Analysis module for storefront admin analytics."""

from .store_metrics import (
    store_performance,
    store_status_distribution,
    store_overview,
    sales_by_date,
    products_by_category,
    sales_overview,
)

__all__ = [
    "store_performance",
    "store_status_distribution",
    "store_overview",
    "sales_by_date",
    "products_by_category",
    "sales_overview",
]
