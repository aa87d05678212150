"""Cart API routes"""

from typing import Optional
from fastapi import APIRouter, Depends, Request

from ..database.cart import CartEngine
from ..models.cart import (
    AddItemRequest,
    UpdateItemRequest,
    CartResponse,
    CheckoutResponse,
    ErrorResponse,
)

router = APIRouter(prefix="/cart", tags=["Cart"])

BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid input"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Item not in cart"}}


def get_cart_engine(request: Request) -> CartEngine:
    """Cart engine owned by the running application"""
    return request.app.state.cart_engine


@router.get("", response_model=CartResponse, response_model_exclude_none=True)
async def get_cart(engine: CartEngine = Depends(get_cart_engine)):
    """Get cart contents with total and item count"""
    return CartResponse(data=engine.get_cart())


@router.post("", response_model=CartResponse, status_code=201, responses=BAD_REQUEST)
async def add_item(
    request: AddItemRequest,
    engine: CartEngine = Depends(get_cart_engine),
):
    """
    Add an item to the cart.

    Adding a productId that is already in the cart increases its quantity;
    the stored name and price are kept.
    """
    cart = engine.add_item(
        product_id=request.product_id,
        name=request.name,
        price=request.price,
        quantity=request.quantity,
    )
    return CartResponse(data=cart, message="Item added to cart")


@router.post("/checkout", response_model=CheckoutResponse, responses=BAD_REQUEST)
async def checkout(engine: CartEngine = Depends(get_cart_engine)):
    """Checkout the cart: returns the order summary and empties the cart"""
    order = engine.checkout()
    return CheckoutResponse(data=order, message="Checkout successful")


@router.put(
    "/{product_id}",
    response_model=CartResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
)
async def update_item(
    product_id: int,
    request: Optional[UpdateItemRequest] = None,
    engine: CartEngine = Depends(get_cart_engine),
):
    """Update item quantity and/or price; fields left out of the body are kept"""
    request = request or UpdateItemRequest()
    # null is a value to validate, not an omitted field
    changes = {field: getattr(request, field) for field in request.model_fields_set}
    cart = engine.update_item(product_id, **changes)
    return CartResponse(data=cart, message="Item updated")


@router.delete("/{product_id}", response_model=CartResponse, responses=NOT_FOUND)
async def remove_item(
    product_id: int,
    engine: CartEngine = Depends(get_cart_engine),
):
    """Remove an item from the cart"""
    cart = engine.remove_item(product_id)
    return CartResponse(data=cart, message="Item removed from cart")


@router.delete("", response_model=CartResponse)
async def clear_cart(engine: CartEngine = Depends(get_cart_engine)):
    """Clear all items from cart"""
    cart = engine.clear_cart()
    return CartResponse(data=cart, message="Cart cleared")
