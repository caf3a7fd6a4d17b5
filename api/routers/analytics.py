"""Admin analytics API router."""

from fastapi import APIRouter

from api.models.schemas import SalesOverview, StoreOverview, StorePerformance
from api.services.catalog import CatalogService
from src.analysis.store_metrics import (
    products_by_category,
    sales_by_date,
    sales_overview,
    store_overview,
    store_performance,
    store_status_distribution,
)

router = APIRouter()


@router.get("/overview")
async def get_overview():
    """Revenue, order and product totals, store counts and the store status distribution."""
    stores, orders, products = CatalogService().get_frames()
    return {
        "totals": SalesOverview(**sales_overview(orders, products)),
        "stores": StoreOverview(**store_overview(stores)),
        "status_distribution": store_status_distribution(stores),
    }


@router.get("/store-performance", response_model=list[StorePerformance])
async def get_store_performance():
    """Orders, revenue and product count per store."""
    stores, orders, products = CatalogService().get_frames()
    return store_performance(stores, orders, products)


@router.get("/sales")
async def get_sales():
    """Daily sales totals."""
    _, orders, _ = CatalogService().get_frames()
    return sales_by_date(orders)


@router.get("/categories")
async def get_categories():
    """Product counts per category."""
    _, _, products = CatalogService().get_frames()
    return products_by_category(products)
