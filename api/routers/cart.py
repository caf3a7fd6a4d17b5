"""Cart API router.

The server holds no cart; clients send their cart state with each action and
receive the reduced state back.
"""

from fastapi import APIRouter, HTTPException

from api.models.schemas import CartReduceRequest, CartResponse
from src.catalog.cart import CartAction, CartState, InvalidCartAction, cart_reducer

router = APIRouter()


@router.post("/reduce", response_model=CartResponse)
async def reduce_cart(request: CartReduceRequest):
    """Apply one cart action to the supplied cart state."""
    try:
        state = CartState.from_dict(request.state)
        new_state = cart_reducer(state, CartAction(request.type, request.product_id))
    except InvalidCartAction as e:
        raise HTTPException(status_code=400, detail=str(e))
    return new_state.to_dict()
