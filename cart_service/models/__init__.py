# Cart Service Models

from .cart import (
    LineItem,
    CartSnapshot,
    OrderSummary,
    AddItemRequest,
    UpdateItemRequest,
    CartResponse,
    CheckoutResponse,
    ErrorDetail,
    ErrorResponse,
)

__all__ = [
    "LineItem",
    "CartSnapshot",
    "OrderSummary",
    "AddItemRequest",
    "UpdateItemRequest",
    "CartResponse",
    "CheckoutResponse",
    "ErrorDetail",
    "ErrorResponse",
]
