"""In-memory cart engine"""

import logging
import math
import threading
import time
import uuid
from datetime import datetime, timezone
from decimal import Decimal, MAX_EMAX, MAX_PREC, ROUND_HALF_UP, localcontext
from numbers import Real
from typing import Any, Optional

from ..core.errors import ValidationError, NotFoundError, BadRequestError
from ..models.cart import LineItem, CartSnapshot, OrderSummary

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")

# Marks an update field the caller did not send
MISSING: Any = object()


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return isinstance(value, int) or math.isfinite(value)


def _as_int(value: Any) -> Optional[int]:
    """Integral numbers as int (2.0 -> 2), anything else as None"""
    if not _is_number(value) or int(value) != value:
        return None
    return int(value)


def _valid_product_id(value: Any) -> Optional[int]:
    product_id = _as_int(value)
    return product_id if product_id else None


def _valid_name(value: Any) -> Optional[str]:
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def _valid_price(value: Any) -> Optional[float]:
    if not _is_number(value) or value <= 0:
        return None
    try:
        return float(value)
    except OverflowError:
        return None


def _valid_quantity(value: Any) -> Optional[int]:
    quantity = _as_int(value)
    if quantity is None or quantity < 1:
        return None
    return quantity


def _generate_order_id() -> str:
    # Millisecond timestamp plus random suffix; unique in practice, not guaranteed
    return f"ORD-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8].upper()}"


class CartEngine:
    """
    Single shopping cart held in memory.

    Items are keyed by productId in insertion order. Every public method
    holds the instance lock for its whole computation, so concurrent
    callers always see and leave a consistent cart. Mutations are priced
    on a staged copy and only committed once the snapshot builds.
    """

    def __init__(self):
        self.items: dict[int, LineItem] = {}
        self._lock = threading.Lock()

    def get_cart(self) -> CartSnapshot:
        """Get current cart contents with computed totals"""
        with self._lock:
            logger.debug(f"Getting cart contents ({len(self.items)} items)")
            return self._snapshot(self.items)

    def add_item(
        self,
        product_id: Any,
        name: Any,
        price: Any,
        quantity: Any,
    ) -> CartSnapshot:
        """Add an item to the cart, or increment its quantity if present"""
        valid_id = _valid_product_id(product_id)
        if valid_id is None:
            raise ValidationError("productId is required")
        valid_name = _valid_name(name)
        if valid_name is None:
            raise ValidationError("name is required")
        valid_price = _valid_price(price)
        if valid_price is None:
            raise ValidationError("price must be greater than 0")
        valid_quantity = _valid_quantity(quantity)
        if valid_quantity is None:
            raise ValidationError("quantity must be at least 1")

        with self._lock:
            existing_item = self.items.get(valid_id)

            if existing_item:
                # Name and price of the first add win
                item = existing_item.model_copy(
                    update={"quantity": existing_item.quantity + valid_quantity}
                )
            else:
                item = LineItem(
                    product_id=valid_id,
                    name=valid_name,
                    price=valid_price,
                    quantity=valid_quantity,
                )

            staged = {**self.items, valid_id: item}
            snapshot = self._snapshot(staged)
            self.items = staged

            if existing_item:
                logger.info(f"Incremented product {valid_id} to quantity {item.quantity}")
            else:
                logger.info(f"Added product {valid_id} ({valid_name}) x{valid_quantity}")
            return snapshot

    def update_item(
        self,
        product_id: int,
        quantity: Any = MISSING,
        price: Any = MISSING,
    ) -> CartSnapshot:
        """
        Overwrite quantity and/or price of an item already in the cart.

        Omitted fields keep their value; an explicit None is an invalid value.
        """
        if quantity is MISSING and price is MISSING:
            raise ValidationError("at least one field must be provided")

        changes: dict[str, Any] = {}
        if quantity is not MISSING:
            changes["quantity"] = _valid_quantity(quantity)
            if changes["quantity"] is None:
                raise ValidationError("quantity must be at least 1")

        if price is not MISSING:
            changes["price"] = _valid_price(price)
            if changes["price"] is None:
                raise ValidationError("price must be greater than 0")

        with self._lock:
            item = self.items.get(product_id)
            if item is None:
                raise NotFoundError(f"item with productId {product_id} not found")

            item = item.model_copy(update=changes)
            staged = {**self.items, product_id: item}
            snapshot = self._snapshot(staged)
            self.items = staged

            logger.info(
                f"Updated product {product_id}: quantity={item.quantity}, price={item.price}"
            )
            return snapshot

    def remove_item(self, product_id: int) -> CartSnapshot:
        """Remove an item from the cart"""
        with self._lock:
            if product_id not in self.items:
                raise NotFoundError(f"item with productId {product_id} not found")

            del self.items[product_id]
            logger.info(f"Removed product {product_id}")
            return self._snapshot(self.items)

    def clear_cart(self) -> CartSnapshot:
        """Clear all items from cart"""
        with self._lock:
            logger.info(f"Clearing cart ({len(self.items)} items)")
            self.items = {}
            return self._snapshot(self.items)

    def checkout(self) -> OrderSummary:
        """Turn the cart into an order summary and empty it"""
        with self._lock:
            if not self.items:
                raise BadRequestError("cannot checkout with an empty cart")

            snapshot = self._snapshot(self.items)
            order = OrderSummary(
                order_id=_generate_order_id(),
                items=snapshot.items,
                total=snapshot.total,
                item_count=snapshot.item_count,
                checkout_time=datetime.now(timezone.utc),
            )

            self.items = {}

            logger.info(
                f"Order {order.order_id} created: ${order.total:.2f} "
                f"for {order.item_count} items"
            )
            return order

    def reset(self) -> None:
        """Drop all items without logging an operation"""
        with self._lock:
            self.items = {}

    @staticmethod
    def _snapshot(items: dict[int, LineItem]) -> CartSnapshot:
        """Build a snapshot of the given items; caller holds the lock"""
        copies = [item.model_copy() for item in items.values()]
        with localcontext() as ctx:
            # Sums and products of finite decimals are exact at MAX_PREC
            ctx.prec = MAX_PREC
            ctx.Emax = MAX_EMAX
            total = sum(
                (Decimal(str(item.price)) * item.quantity for item in copies),
                Decimal("0"),
            ).quantize(CENT, rounding=ROUND_HALF_UP)

        if not math.isfinite(float(total)):
            raise ValidationError("cart total is too large")

        return CartSnapshot(
            items=copies,
            total=float(total),
            item_count=sum(item.quantity for item in copies),
        )
