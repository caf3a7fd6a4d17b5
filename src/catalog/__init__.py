"""Catalog module: query codec, product listing and cart reducer."""

from .query import (
    InvalidQueryInput,
    Scalar,
    Multi,
    FilterValue,
    FilterState,
    parse_query,
    stringify_query,
    update_query,
    toggle_filter,
    remove_filter,
    clear_all_filters,
    is_filter_active,
    get_sort,
    to_plain,
)
from .listing import (
    Product,
    PriceBounds,
    ActiveFilter,
    ListingResult,
    filter_products,
    sort_products,
    list_products,
    category_facets,
    price_bounds,
    active_filters,
    price_range_patch,
)
from .cart import (
    CartState,
    CartAction,
    InvalidCartAction,
    cart_reducer,
    add_to_cart,
    remove_from_cart,
    delete_item_from_cart,
    clear_cart,
)

__all__ = [
    "InvalidQueryInput",
    "Scalar",
    "Multi",
    "FilterValue",
    "FilterState",
    "parse_query",
    "stringify_query",
    "update_query",
    "toggle_filter",
    "remove_filter",
    "clear_all_filters",
    "is_filter_active",
    "get_sort",
    "to_plain",
    "Product",
    "PriceBounds",
    "ActiveFilter",
    "ListingResult",
    "filter_products",
    "sort_products",
    "list_products",
    "category_facets",
    "price_bounds",
    "active_filters",
    "price_range_patch",
    "CartState",
    "CartAction",
    "InvalidCartAction",
    "cart_reducer",
    "add_to_cart",
    "remove_from_cart",
    "delete_item_from_cart",
    "clear_cart",
]
