"""Products API router.

The listing endpoint reads its filters straight from the raw query string so
repeated keys (``category=A&category=B``) reach the query codec unchanged.
"""

from fastapi import APIRouter, HTTPException, Query, Request
from typing import Optional

from api.config import get_settings
from api.models.schemas import (
    FacetsResponse,
    ProductCreate,
    ProductItem,
    ProductListResponse,
)
from api.services.catalog import CatalogService
from config.constants import SORT_OPTIONS, get_sort_label
from src.catalog.listing import (
    active_filters,
    category_facets,
    list_products,
    price_bounds,
)
from src.catalog.query import to_plain

router = APIRouter()


@router.get("", response_model=ProductListResponse)
async def list_catalog_products(
    request: Request,
    search: Optional[str] = Query(None, description="Search text in name or description"),
):
    """List products filtered and sorted by the query string.

    Recognized keys: ``category`` (repeatable), ``price_min``, ``price_max``
    and ``sort`` (featured, newest, price_asc, price_desc).
    """
    settings = get_settings()
    products = CatalogService().get_products(search=search)
    result = list_products(products, request.url.query)

    return {
        "products": [p.to_dict() for p in result.products],
        "total": result.total,
        "shown": result.shown,
        "sort": result.sort,
        "sort_label": get_sort_label(result.sort),
        "filters": to_plain(result.state),
        "active_filters": [f.to_dict() for f in active_filters(result.state, settings.currency)],
    }


@router.get("/facets", response_model=FacetsResponse)
async def get_facets():
    """Get categories, price range and sort options for the filter sidebar."""
    products = CatalogService().get_products()
    bounds = price_bounds(products)

    return {
        "categories": category_facets(products),
        "price": {"min": bounds.min, "max": bounds.max},
        "sort_options": [{"id": key, "name": label} for key, label in SORT_OPTIONS],
    }


@router.get("/{product_id}", response_model=ProductItem)
async def get_product(product_id: str):
    """Get a single product."""
    product = CatalogService().get_product(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product.to_dict()


@router.post("", response_model=ProductItem, status_code=201)
async def create_product(request: ProductCreate):
    """Create a new product."""
    product = CatalogService().create_product(
        name=request.name,
        price=request.price,
        category=request.category,
        description=request.description,
        mrp=request.mrp,
        in_stock=request.in_stock,
        store_id=request.store_id,
    )
    return product.to_dict()
