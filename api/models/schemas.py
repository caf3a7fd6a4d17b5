"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field
from typing import Optional, Union
from enum import Enum


class SortKey(str, Enum):
    """Product sort orders."""
    FEATURED = "featured"
    NEWEST = "newest"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"


FilterValueIn = Union[str, float, list[Union[str, float]], None]


class ProductItem(BaseModel):
    """Product information."""
    id: str
    name: str
    category: str
    price: float
    mrp: Optional[float] = None
    description: Optional[str] = None
    in_stock: bool = True
    store_id: Optional[str] = None
    created_at: Optional[str] = None


class ProductCreate(BaseModel):
    """Request body for creating a product."""
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    category: str = Field(..., min_length=1)
    description: Optional[str] = None
    mrp: Optional[float] = Field(None, ge=0)
    in_stock: bool = True
    store_id: Optional[str] = None


class ActiveFilterItem(BaseModel):
    """Removable filter chip."""
    key: str
    value: str
    display: str


class SortOption(BaseModel):
    """Sort dropdown entry."""
    id: SortKey
    name: str


class PriceRange(BaseModel):
    """Lowest and highest product price."""
    min: float
    max: float


class FacetsResponse(BaseModel):
    """Data for the filter sidebar."""
    categories: list[str]
    price: PriceRange
    sort_options: list[SortOption]


class ProductListResponse(BaseModel):
    """Response for product list endpoint."""
    products: list[ProductItem]
    total: int
    shown: int
    sort: SortKey
    sort_label: str
    filters: dict[str, Union[str, list[str]]]
    active_filters: list[ActiveFilterItem]


class QueryRequest(BaseModel):
    """A codec operation on the current query string."""
    query: str = ""
    key: Optional[str] = None
    value: Optional[Union[str, float]] = None
    patch: Optional[dict[str, FilterValueIn]] = None


class PriceRangeRequest(BaseModel):
    """New slider position for the price filter."""
    query: str = ""
    low: float
    high: float


class QueryResponse(BaseModel):
    """Re-encoded query string."""
    query: str


class CartReduceRequest(BaseModel):
    """A cart action applied to a client-held cart."""
    state: dict = Field(default_factory=dict, description="{'cartItems': {...}, 'total': n}")
    type: str
    product_id: Optional[str] = None


class CartResponse(BaseModel):
    """Cart state after a reduction."""
    cartItems: dict[str, int]
    total: int


class StorePerformance(BaseModel):
    """Per-store chart row."""
    name: str
    orders: int
    revenue: float
    products: int


class StoreOverview(BaseModel):
    """Store counts."""
    total: int
    active: int
    pending: int


class SalesOverview(BaseModel):
    """Totals for the dashboard cards."""
    revenue: float
    orders: int
    products: int
