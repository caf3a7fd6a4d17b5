"""Filter/sort query codec for the product listing.

Translates between a URL query string (``category=Kitchen&sort=newest``) and a
structured filter state, and provides the pure transformations used by the
filter sidebar and the sort dropdown. Every transformation returns a new
encoded query string; inputs are never mutated.

Filter values are a tagged variant: a key holds either a ``Scalar`` (one
value) or a ``Multi`` (an ordered sequence of values). Both expose ``values``
so callers can treat them uniformly.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union
from urllib.parse import parse_qsl, urlencode

from config.constants import DEFAULT_SORT, FILTER_KEYS, is_valid_sort
from config.logging_config import get_logger

logger = get_logger("query")


class InvalidQueryInput(ValueError):
    """Raised when a codec argument has the wrong shape."""


@dataclass(frozen=True)
class Scalar:
    """A filter key holding exactly one value."""

    value: str

    @property
    def values(self) -> Tuple[str, ...]:
        return (self.value,)


@dataclass(frozen=True)
class Multi:
    """A filter key holding an ordered sequence of values."""

    values: Tuple[str, ...]


FilterValue = Union[Scalar, Multi]
FilterState = Dict[str, FilterValue]


# =============================================================================
# Input normalization
# =============================================================================

def _coerce_text(value: Any) -> str:
    """Convert a single raw value to its query-string text."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        raise InvalidQueryInput(f"Boolean is not a valid filter value: {value!r}")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    raise InvalidQueryInput(f"Unsupported filter value type: {type(value).__name__}")


def coerce_value(value: Any) -> Optional[FilterValue]:
    """Normalize a raw filter value into a ``Scalar`` or ``Multi``.

    Accepts strings, numbers, lists/tuples of those, already tagged values,
    or ``None`` (returned unchanged).

    Raises:
        InvalidQueryInput: If the value cannot be represented in a query string.
    """
    if value is None or isinstance(value, (Scalar, Multi)):
        return value
    if isinstance(value, (list, tuple)):
        return Multi(tuple(_coerce_text(v) for v in value if v is not None))
    return Scalar(_coerce_text(value))


def coerce_state(current: Any) -> Dict[str, Optional[FilterValue]]:
    """Normalize a mapping of raw filter values into a fresh filter state.

    ``None`` values are kept so merge operations can see them; they are
    dropped on encoding.

    Raises:
        InvalidQueryInput: If ``current`` is not a mapping, or holds a
            non-string key or an unsupported value.
    """
    if not isinstance(current, Mapping):
        raise InvalidQueryInput(f"Filter state must be a mapping, got {type(current).__name__}")

    state: Dict[str, Optional[FilterValue]] = {}
    for key, value in current.items():
        if not isinstance(key, str):
            raise InvalidQueryInput(f"Filter key must be a string, got {key!r}")
        state[key] = coerce_value(value)
    return state


def _coerce_key(key: Any) -> str:
    if not isinstance(key, str) or not key:
        raise InvalidQueryInput(f"Filter key must be a non-empty string, got {key!r}")
    return key


def _is_unset(value: Optional[FilterValue]) -> bool:
    return value is None or value == Scalar("")


# =============================================================================
# Encoding
# =============================================================================

def parse_query(query_string: Any) -> FilterState:
    """Parse a URL query string into a filter state.

    A leading ``?`` is stripped. Repeated keys accumulate: the first
    occurrence is stored as a ``Scalar``, the second promotes it to a
    two-element ``Multi`` and later ones append in order of appearance.
    Blank values are dropped.

    Args:
        query_string: Query string, with or without the leading ``?``.

    Returns:
        Parsed filter state; empty for empty or non-string input.
    """
    if not isinstance(query_string, str):
        if query_string is not None:
            logger.warning(f"Ignoring non-string query: {type(query_string).__name__}")
        return {}

    if query_string.startswith("?"):
        query_string = query_string[1:]
    if not query_string:
        return {}

    state: FilterState = {}
    for key, value in parse_qsl(query_string, keep_blank_values=False):
        existing = state.get(key)
        if existing is None:
            state[key] = Scalar(value)
        else:
            state[key] = Multi(existing.values + (value,))
    return state


def _encode(state: Mapping[str, Optional[FilterValue]]) -> str:
    pairs = []
    for key, value in state.items():
        if value is None:
            continue
        for item in value.values:
            pairs.append((key, item))
    return urlencode(pairs)


def stringify_query(state: Any) -> str:
    """Encode a filter state as a query string without a leading ``?``.

    ``Multi`` values are emitted as repeated pairs in sequence order, scalars
    once, and ``None`` values are skipped. Key order follows the mapping's
    insertion order.
    """
    try:
        return _encode(coerce_state(state))
    except InvalidQueryInput as e:
        logger.warning(f"Cannot stringify filter state: {e}")
        return ""


# =============================================================================
# Transformations
# =============================================================================

def update_query(current: Any, patch: Any) -> str:
    """Shallow-merge ``patch`` over ``current`` and encode the result.

    Keys whose merged value is ``None`` or an empty sequence are removed.
    Used for single-field replacements such as changing the sort order.
    """
    try:
        state = coerce_state(current)
    except InvalidQueryInput as e:
        logger.warning(f"update_query: invalid current state: {e}")
        return ""

    try:
        state.update(coerce_state(patch))
    except InvalidQueryInput as e:
        logger.warning(f"update_query: ignoring invalid patch: {e}")
        return _encode(state)

    return _encode({
        key: value
        for key, value in state.items()
        if value is not None and value.values
    })


def toggle_filter(current: Any, key: Any, value: Any) -> str:
    """Flip ``value`` in or out of the filter ``key``.

    An absent key becomes a one-element ``Multi``. In a ``Multi`` the value is
    removed when present and appended otherwise. A ``Scalar`` equal to the
    value removes the key; a different ``Scalar`` is promoted to
    ``Multi((existing, value))``. A key left without values is removed.
    """
    try:
        state = coerce_state(current)
    except InvalidQueryInput as e:
        logger.warning(f"toggle_filter: invalid current state: {e}")
        return ""

    try:
        key = _coerce_key(key)
        value = _coerce_text(value)
    except InvalidQueryInput as e:
        logger.warning(f"toggle_filter: ignoring invalid argument: {e}")
        return _encode(state)

    existing = state.get(key)
    if _is_unset(existing):
        state[key] = Multi((value,))
    elif isinstance(existing, Multi):
        if value in existing.values:
            remaining = tuple(v for v in existing.values if v != value)
        else:
            remaining = existing.values + (value,)
        if remaining:
            state[key] = Multi(remaining)
        else:
            del state[key]
    elif existing.value == value:
        del state[key]
    else:
        # Promotes on mismatch instead of storing a one-element Multi from
        # the start; parse_query would give Scalar for the same string.
        state[key] = Multi((existing.value, value))

    return _encode(state)


def remove_filter(current: Any, key: Any, value: Any = None) -> str:
    """Remove a filter key, or a single value from it.

    With ``value=None`` the whole key is removed. Otherwise the matching
    element is removed from a ``Multi`` (dropping the key when it empties), or
    the key is removed if its ``Scalar`` equals ``value``. Anything else is a
    no-op.
    """
    try:
        state = coerce_state(current)
    except InvalidQueryInput as e:
        logger.warning(f"remove_filter: invalid current state: {e}")
        return ""

    try:
        key = _coerce_key(key)
        if value is not None:
            value = _coerce_text(value)
    except InvalidQueryInput as e:
        logger.warning(f"remove_filter: ignoring invalid argument: {e}")
        return _encode(state)

    existing = state.get(key)
    if value is None:
        state.pop(key, None)
    elif isinstance(existing, Multi):
        remaining = tuple(v for v in existing.values if v != value)
        if remaining:
            state[key] = Multi(remaining)
        else:
            del state[key]
    elif isinstance(existing, Scalar) and existing.value == value:
        del state[key]

    return _encode(state)


def clear_all_filters(current: Any) -> str:
    """Remove every product filter key, keeping unrelated keys."""
    try:
        state = coerce_state(current)
    except InvalidQueryInput as e:
        logger.warning(f"clear_all_filters: invalid current state: {e}")
        return ""

    for key in FILTER_KEYS:
        state.pop(key, None)
    return _encode(state)


# =============================================================================
# Readers
# =============================================================================

def get_values(state: Mapping[str, Optional[FilterValue]], key: str) -> Tuple[str, ...]:
    """Get all values of a filter key; empty when absent."""
    value = state.get(key)
    return value.values if value is not None else ()


def get_single(state: Mapping[str, Optional[FilterValue]], key: str) -> Optional[str]:
    """Get the first value of a filter key, or None."""
    values = get_values(state, key)
    return values[0] if values else None


def is_filter_active(state: Mapping[str, Optional[FilterValue]], key: str, value: str) -> bool:
    """Check whether ``value`` is selected for ``key`` (checkbox state)."""
    return value in get_values(state, key)


def get_sort(state: Mapping[str, Optional[FilterValue]]) -> str:
    """Get the sort key, falling back to the default for missing or unknown keys."""
    sort_key = get_single(state, "sort")
    return sort_key if is_valid_sort(sort_key) else DEFAULT_SORT


def to_plain(state: Mapping[str, Optional[FilterValue]]) -> Dict[str, Union[str, list]]:
    """Convert a filter state to JSON-friendly strings and lists."""
    plain: Dict[str, Union[str, list]] = {}
    for key, value in state.items():
        if isinstance(value, Multi):
            plain[key] = list(value.values)
        elif isinstance(value, Scalar):
            plain[key] = value.value
    return plain
