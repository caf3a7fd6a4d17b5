"""Query codec API router.

Lets clients that don't run the codec themselves compute the next query
string for a filter interaction.
"""

from fastapi import APIRouter, HTTPException, Query

from api.models.schemas import PriceRangeRequest, QueryRequest, QueryResponse
from api.services.catalog import CatalogService
from src.catalog.listing import price_bounds, price_range_patch
from src.catalog.query import (
    InvalidQueryInput,
    clear_all_filters,
    coerce_state,
    parse_query,
    remove_filter,
    to_plain,
    toggle_filter,
    update_query,
)

router = APIRouter()


def _require_key(request: QueryRequest) -> str:
    if not request.key:
        raise HTTPException(status_code=400, detail="key is required")
    return request.key


@router.get("/parse")
async def parse(q: str = Query("", description="Query string, with or without '?'")):
    """Parse a query string into its filter values."""
    return to_plain(parse_query(q))


@router.post("/toggle", response_model=QueryResponse)
async def toggle(request: QueryRequest):
    """Toggle a filter value in or out."""
    key = _require_key(request)
    if request.value is None:
        raise HTTPException(status_code=400, detail="value is required")
    return {"query": toggle_filter(parse_query(request.query), key, request.value)}


@router.post("/remove", response_model=QueryResponse)
async def remove(request: QueryRequest):
    """Remove a filter key, or one of its values."""
    key = _require_key(request)
    return {"query": remove_filter(parse_query(request.query), key, request.value)}


@router.post("/update", response_model=QueryResponse)
async def update(request: QueryRequest):
    """Merge a patch of filter values into the query."""
    if request.patch is None:
        raise HTTPException(status_code=400, detail="patch is required")
    try:
        coerce_state(request.patch)
    except InvalidQueryInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"query": update_query(parse_query(request.query), request.patch)}


@router.post("/clear", response_model=QueryResponse)
async def clear(request: QueryRequest):
    """Remove all product filters, keeping unrelated keys."""
    return {"query": clear_all_filters(parse_query(request.query))}


@router.post("/price-range", response_model=QueryResponse)
async def price_range(request: PriceRangeRequest):
    """Apply a price slider position against the catalog's price range."""
    if request.low > request.high:
        raise HTTPException(status_code=400, detail="low must not exceed high")
    bounds = price_bounds(CatalogService().get_products())
    return {"query": price_range_patch(parse_query(request.query), request.low, request.high, bounds)}
