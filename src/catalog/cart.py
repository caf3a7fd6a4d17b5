"""Cart bookkeeping as a pure reducer.

The cart is an explicit ``CartState`` value passed in and returned by
``cart_reducer``; nothing is held globally and states are never mutated.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from config.logging_config import get_logger

logger = get_logger("cart")

ADD_TO_CART = "cart/addToCart"
REMOVE_FROM_CART = "cart/removeFromCart"
DELETE_ITEM_FROM_CART = "cart/deleteItemFromCart"
CLEAR_CART = "cart/clearCart"

ACTION_TYPES = (ADD_TO_CART, REMOVE_FROM_CART, DELETE_ITEM_FROM_CART, CLEAR_CART)


class InvalidCartAction(ValueError):
    """Raised for an unknown action type or a malformed payload."""


@dataclass(frozen=True)
class CartState:
    """Quantities per product id and the total item count."""

    items: Dict[str, int] = field(default_factory=dict)
    total: int = 0

    def quantity(self, product_id: str) -> int:
        return self.items.get(product_id, 0)

    def to_dict(self) -> Dict[str, Any]:
        return {"cartItems": dict(self.items), "total": self.total}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CartState":
        """Create from the wire shape ``{"cartItems": {...}, "total": n}``.

        The total is recomputed from the item counts.
        """
        raw_items = data.get("cartItems") or {}
        if not isinstance(raw_items, Mapping):
            raise InvalidCartAction("cartItems must be an object")

        items = {}
        for product_id, count in raw_items.items():
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise InvalidCartAction(f"Invalid quantity for {product_id}: {count!r}")
            if count:
                items[str(product_id)] = count
        return cls(items=items, total=sum(items.values()))


@dataclass(frozen=True)
class CartAction:
    """A cart action; ``product_id`` is unused by ``clear``."""

    type: str
    product_id: Optional[str] = None


def add_to_cart(product_id: str) -> CartAction:
    return CartAction(ADD_TO_CART, product_id)


def remove_from_cart(product_id: str) -> CartAction:
    return CartAction(REMOVE_FROM_CART, product_id)


def delete_item_from_cart(product_id: str) -> CartAction:
    return CartAction(DELETE_ITEM_FROM_CART, product_id)


def clear_cart() -> CartAction:
    return CartAction(CLEAR_CART)


def cart_reducer(state: CartState, action: CartAction) -> CartState:
    """Apply an action to a cart state and return the new state.

    Args:
        state: Current cart.
        action: Action to apply.

    Returns:
        New cart state.

    Raises:
        InvalidCartAction: For unknown action types or a missing product id.
    """
    if action.type not in ACTION_TYPES:
        raise InvalidCartAction(f"Unknown cart action: {action.type!r}")

    if action.type == CLEAR_CART:
        return CartState()

    if not action.product_id:
        raise InvalidCartAction(f"{action.type} requires a product id")

    items = dict(state.items)
    product_id = action.product_id
    count = items.get(product_id, 0)

    if action.type == ADD_TO_CART:
        items[product_id] = count + 1
        return CartState(items=items, total=state.total + 1)

    if action.type == REMOVE_FROM_CART:
        if not count:
            logger.debug(f"Remove ignored, {product_id} not in cart")
            return state
        if count == 1:
            del items[product_id]
        else:
            items[product_id] = count - 1
        return CartState(items=items, total=max(state.total - 1, 0))

    # DELETE_ITEM_FROM_CART
    items.pop(product_id, None)
    return CartState(items=items, total=max(state.total - count, 0))
