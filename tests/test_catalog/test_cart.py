"""Tests for the cart reducer."""

import pytest

from src.catalog.cart import (
    CartAction,
    CartState,
    InvalidCartAction,
    add_to_cart,
    cart_reducer,
    clear_cart,
    delete_item_from_cart,
    remove_from_cart,
)


class TestCartReducer:
    """Tests for cart_reducer."""

    def test_add_increments(self):
        """Adding twice counts two of the same product."""
        state = cart_reducer(CartState(), add_to_cart("prod_1"))
        state = cart_reducer(state, add_to_cart("prod_1"))

        assert state.items == {"prod_1": 2}
        assert state.total == 2

    def test_remove_decrements_and_drops_zero(self):
        """Removing the last unit removes the item."""
        state = CartState(items={"prod_1": 2}, total=2)
        state = cart_reducer(state, remove_from_cart("prod_1"))
        assert state.items == {"prod_1": 1}

        state = cart_reducer(state, remove_from_cart("prod_1"))
        assert state.items == {}
        assert state.total == 0

    def test_remove_absent_is_noop(self):
        """The total never goes negative."""
        state = CartState()
        assert cart_reducer(state, remove_from_cart("prod_9")) == state

    def test_delete_subtracts_whole_count(self):
        """Deleting an item removes all its units."""
        state = CartState(items={"prod_1": 3, "prod_2": 1}, total=4)
        state = cart_reducer(state, delete_item_from_cart("prod_1"))

        assert state.items == {"prod_2": 1}
        assert state.total == 1

    def test_clear(self):
        """Clearing empties the cart."""
        state = CartState(items={"prod_1": 3}, total=3)
        assert cart_reducer(state, clear_cart()) == CartState()

    def test_input_state_not_mutated(self):
        """Reducer returns a new state."""
        state = CartState(items={"prod_1": 1}, total=1)
        cart_reducer(state, add_to_cart("prod_1"))
        assert state.items == {"prod_1": 1}

    def test_unknown_action(self):
        """Unknown actions are rejected."""
        with pytest.raises(InvalidCartAction):
            cart_reducer(CartState(), CartAction("cart/explode", "prod_1"))

    def test_missing_product_id(self):
        """Item actions need a product id."""
        with pytest.raises(InvalidCartAction):
            cart_reducer(CartState(), CartAction("cart/addToCart"))


class TestCartStateSerialization:
    """Tests for the wire shape."""

    def test_from_dict_recomputes_total(self):
        """The total follows the item counts."""
        state = CartState.from_dict({"cartItems": {"prod_1": 2, "prod_2": 0}, "total": 99})
        assert state.items == {"prod_1": 2}
        assert state.total == 2

    def test_from_dict_rejects_bad_quantity(self):
        """Negative or non-integer quantities are invalid."""
        with pytest.raises(InvalidCartAction):
            CartState.from_dict({"cartItems": {"prod_1": -1}})
        with pytest.raises(InvalidCartAction):
            CartState.from_dict({"cartItems": {"prod_1": "two"}})

    def test_to_dict(self):
        """Serialized with the client's key names."""
        assert CartState(items={"prod_1": 1}, total=1).to_dict() == {"cartItems": {"prod_1": 1}, "total": 1}
