"""Constants for the storefront catalog.

Filter keys and sort options shared by the query codec, the product listing
and the HTTP layer.
"""

from typing import Dict, List, Tuple


# =============================================================================
# Filter Keys
# =============================================================================

# Keys owned by the product filters; clearing filters removes exactly these
FILTER_KEYS: Tuple[str, ...] = ("category", "price_min", "price_max", "sort")


# =============================================================================
# Sorting
# =============================================================================

SORT_OPTIONS: List[Tuple[str, str]] = [
    ("featured", "Featured"),
    ("newest", "Newest"),
    ("price_asc", "Price: Low to High"),
    ("price_desc", "Price: High to Low"),
]

SORT_KEYS: Tuple[str, ...] = tuple(key for key, _ in SORT_OPTIONS)

DEFAULT_SORT = "featured"

_SORT_LABELS: Dict[str, str] = dict(SORT_OPTIONS)


# =============================================================================
# Display
# =============================================================================

DEFAULT_CURRENCY = "KSH"


# =============================================================================
# Helper Functions
# =============================================================================

def is_valid_sort(sort_key: object) -> bool:
    """Check whether a value is one of the known sort keys."""
    return isinstance(sort_key, str) and sort_key in _SORT_LABELS


def get_sort_label(sort_key: str) -> str:
    """Get the display label for a sort key, falling back to the default."""
    return _SORT_LABELS.get(sort_key, _SORT_LABELS[DEFAULT_SORT])
