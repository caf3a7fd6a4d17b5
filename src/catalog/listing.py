"""Product listing: filtering, sorting and sidebar data for the catalog page."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

from config.constants import DEFAULT_CURRENCY
from config.logging_config import get_logger
from src.catalog.query import (
    FilterState,
    get_single,
    get_sort,
    get_values,
    parse_query,
    update_query,
)

logger = get_logger("listing")


@dataclass
class Product:
    """A product record as shown in the catalog."""

    id: str
    name: str
    category: str
    price: float
    mrp: Optional[float] = None
    description: Optional[str] = None
    in_stock: bool = True
    store_id: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON responses."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "price": self.price,
            "mrp": self.mrp,
            "description": self.description,
            "in_stock": self.in_stock,
            "store_id": self.store_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_record(cls, data: Mapping[str, Any]) -> "Product":
        """Create from a database row or dictionary."""
        created_at = data.get("created_at")
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)
        mrp = data.get("mrp")
        return cls(
            id=str(data["id"]),
            name=data["name"],
            category=data["category"],
            price=float(data["price"]),
            mrp=float(mrp) if mrp is not None else None,
            description=data.get("description"),
            in_stock=bool(data.get("in_stock", True)),
            store_id=data.get("store_id"),
            created_at=created_at,
        )


@dataclass
class PriceBounds:
    """Lowest and highest price across a product set."""

    min: float = 0.0
    max: float = 0.0


@dataclass
class ActiveFilter:
    """A removable filter chip shown above the product grid."""

    key: str
    value: str
    display: str

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "value": self.value, "display": self.display}


@dataclass
class ListingResult:
    """Filtered and sorted products with the state that produced them."""

    products: List[Product]
    total: int
    state: FilterState = field(default_factory=dict)
    sort: str = "featured"

    @property
    def shown(self) -> int:
        return len(self.products)


def _parse_bound(state: FilterState, key: str) -> Optional[float]:
    raw = get_single(state, key)
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {key}: {raw!r}")
        return None


def filter_products(products: Iterable[Product], state: FilterState) -> List[Product]:
    """Keep products matching the category selection and price bounds.

    Args:
        products: Products to filter.
        state: Parsed filter state.

    Returns:
        Matching products, in input order.
    """
    categories = set(get_values(state, "category"))
    price_min = _parse_bound(state, "price_min")
    price_max = _parse_bound(state, "price_max")

    result = []
    for product in products:
        if categories and product.category not in categories:
            continue
        if price_min is not None and product.price < price_min:
            continue
        if price_max is not None and product.price > price_max:
            continue
        result.append(product)
    return result


def sort_products(products: Iterable[Product], sort_key: str) -> List[Product]:
    """Sort products by one of the catalog sort keys.

    ``featured`` (and any unknown key) keeps the input order.
    """
    products = list(products)

    if sort_key == "newest":
        dated = [p for p in products if p.created_at is not None]
        undated = [p for p in products if p.created_at is None]
        dated.sort(key=lambda p: p.created_at, reverse=True)
        undated.sort(key=lambda p: p.id, reverse=True)
        return dated + undated
    if sort_key == "price_asc":
        return sorted(products, key=lambda p: p.price)
    if sort_key == "price_desc":
        return sorted(products, key=lambda p: p.price, reverse=True)
    return products


def list_products(products: Iterable[Product], query_string: Any) -> ListingResult:
    """Apply the filters and sort encoded in a query string."""
    products = list(products)
    state = parse_query(query_string)
    sort_key = get_sort(state)

    sorted_products = sort_products(filter_products(products, state), sort_key)
    logger.debug(f"Listing {len(sorted_products)} of {len(products)} products (sort={sort_key})")

    return ListingResult(
        products=sorted_products,
        total=len(products),
        state=state,
        sort=sort_key,
    )


# =============================================================================
# Sidebar helpers
# =============================================================================

def category_facets(products: Iterable[Product]) -> List[str]:
    """Unique product categories in first-seen order."""
    return list(dict.fromkeys(p.category for p in products))


def price_bounds(products: Iterable[Product]) -> PriceBounds:
    """Get the price range of a product set."""
    prices = [p.price for p in products]
    if not prices:
        return PriceBounds()
    return PriceBounds(min=min(prices), max=max(prices))


def _format_amount(raw: str) -> str:
    try:
        amount = float(raw)
    except ValueError:
        return raw
    return str(int(amount)) if amount.is_integer() else str(amount)


def active_filters(state: FilterState, currency: str = DEFAULT_CURRENCY) -> List[ActiveFilter]:
    """Build the removable chips for the filters currently applied.

    One chip per selected category, then the lower and upper price bounds.
    """
    chips = [
        ActiveFilter(key="category", value=category, display=category)
        for category in get_values(state, "category")
    ]

    price_min = get_single(state, "price_min")
    if price_min:
        chips.append(ActiveFilter(
            key="price_min",
            value=price_min,
            display=f"Min: {currency}{_format_amount(price_min)}",
        ))

    price_max = get_single(state, "price_max")
    if price_max:
        chips.append(ActiveFilter(
            key="price_max",
            value=price_max,
            display=f"Max: {currency}{_format_amount(price_max)}",
        ))

    return chips


def price_range_patch(
    state: FilterState,
    low: float,
    high: float,
    bounds: PriceBounds,
) -> str:
    """Encode a new price range chosen on the slider.

    A bound equal to (or beyond) the catalog's own bound is not a filter, so
    ``price_min`` is only set when ``low`` is above the cheapest product and
    ``price_max`` only when ``high`` is below the most expensive one.
    """
    patch = {
        "price_min": low if low > bounds.min else None,
        "price_max": high if high < bounds.max else None,
    }
    return update_query(state, patch)
