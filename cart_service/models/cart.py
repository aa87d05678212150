"""Cart models for the cart service"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase JSON"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class LineItem(CamelModel):
    """One product entry in the cart"""
    product_id: int
    name: str
    price: float = Field(gt=0, description="Unit price")
    quantity: int = Field(ge=1)


class CartSnapshot(CamelModel):
    """Cart contents with derived totals, computed per read"""
    items: list[LineItem] = []
    total: float = 0.0
    item_count: int = 0


class OrderSummary(CamelModel):
    """Result of a successful checkout"""
    order_id: str
    items: list[LineItem]
    total: float
    item_count: int
    checkout_time: datetime


class AddItemRequest(CamelModel):
    """
    Request to add an item to the cart.

    Fields are untyped; the cart engine checks values and reports errors.
    """
    product_id: Optional[Any] = None
    name: Optional[Any] = None
    price: Optional[Any] = None
    quantity: Optional[Any] = None


class UpdateItemRequest(CamelModel):
    """Request to update quantity and/or price of a cart item"""
    quantity: Optional[Any] = None
    price: Optional[Any] = None


class CartResponse(CamelModel):
    """Cart API response"""
    success: bool = True
    message: Optional[str] = None
    data: CartSnapshot


class CheckoutResponse(CamelModel):
    """Checkout API response"""
    success: bool = True
    message: Optional[str] = None
    data: OrderSummary


class ErrorDetail(CamelModel):
    """Error body of a failed request"""
    message: str
    status_code: int


class ErrorResponse(CamelModel):
    """Failure envelope"""
    success: bool = False
    error: ErrorDetail
