"""API Pydantic models."""

from api.models.schemas import (
    SortKey,
    ProductItem,
    ProductCreate,
    ProductListResponse,
    FacetsResponse,
    QueryRequest,
    QueryResponse,
    CartReduceRequest,
    CartResponse,
)

__all__ = [
    "SortKey",
    "ProductItem",
    "ProductCreate",
    "ProductListResponse",
    "FacetsResponse",
    "QueryRequest",
    "QueryResponse",
    "CartReduceRequest",
    "CartResponse",
]
