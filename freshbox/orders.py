"""
Checkout & Order Tracking

Delivery/payment options, order placement from the current cart and the
tracking timeline shown after an order is placed.

Status flow:
    confirmed -> processing -> out_for_delivery -> delivered
"""

import random
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional

from freshbox.cart import CartLine
from freshbox.errors import (
    ERROR_INVALID_ADDRESS,
    ERROR_INVALID_PAYMENT_METHOD,
    ERROR_INVALID_TIME_SLOT,
    EmptyCartError,
    InvalidCheckoutOptionError,
    OrderNotFoundError,
)
from freshbox.logging import get_logger, sanitize_id_for_logging
from freshbox.money import to_float
from freshbox.store import Store

logger = get_logger(__name__)

DELIVERY_ETA = timedelta(hours=2)


class OrderStatus(str, Enum):
    """Order tracking steps, in order."""
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"


STATUS_FLOW: tuple[OrderStatus, ...] = tuple(OrderStatus)


@dataclass(frozen=True)
class CheckoutOption:
    id: str
    label: str
    detail: str = ""

    def to_dict(self) -> dict:
        return {"id": self.id, "label": self.label, "detail": self.detail}


TIME_SLOTS: tuple[CheckoutOption, ...] = (
    CheckoutOption("morning", "Morning", "8:00 AM - 12:00 PM"),
    CheckoutOption("afternoon", "Afternoon", "12:00 PM - 4:00 PM"),
    CheckoutOption("evening", "Evening", "4:00 PM - 8:00 PM"),
    CheckoutOption("night", "Night", "8:00 PM - 10:00 PM"),
)

PAYMENT_METHODS: tuple[CheckoutOption, ...] = (
    CheckoutOption("card", "Credit/Debit Card"),
    CheckoutOption("upi", "UPI"),
    CheckoutOption("cod", "Cash on Delivery"),
    CheckoutOption("wallet", "Digital Wallet"),
)

ADDRESSES: tuple[CheckoutOption, ...] = (
    CheckoutOption("home", "Home", "123 Main Street, City, State 12345"),
    CheckoutOption("office", "Office", "456 Business Ave, City, State 12345"),
)


def _pick(options: tuple[CheckoutOption, ...], option_id: str, error: str) -> CheckoutOption:
    option = next((o for o in options if o.id == option_id), None)
    if option is None:
        raise InvalidCheckoutOptionError(f"{error}: {option_id}")
    return option


def generate_order_id(rng: random.Random | None = None) -> str:
    """Order ids look like "#ORD12345"."""
    rng = rng or random.Random()
    return f"#ORD{rng.randint(10000, 99999)}"


@dataclass(frozen=True)
class Order:
    """A placed order. Lines and amounts are frozen at placement time."""
    id: str
    lines: tuple[CartLine, ...]
    item_count: int
    subtotal: Decimal
    delivery_fee: Decimal
    total: Decimal
    payment_method: CheckoutOption
    time_slot: CheckoutOption
    address: CheckoutOption
    placed_at: datetime
    estimated_delivery: datetime
    status: OrderStatus = OrderStatus.CONFIRMED

    @property
    def is_delivered(self) -> bool:
        return self.status == OrderStatus.DELIVERED

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "items": [line.to_dict() for line in self.lines],
            "item_count": self.item_count,
            "subtotal": to_float(self.subtotal),
            "delivery_fee": to_float(self.delivery_fee),
            "total": to_float(self.total),
            "payment_method": self.payment_method.label,
            "time_slot": self.time_slot.label,
            "address": self.address.to_dict(),
            "placed_at": self.placed_at.isoformat(),
            "estimated_delivery": self.estimated_delivery.isoformat(),
            "status": self.status.value,
            "timeline": timeline(self),
        }


def place_order(
    store: Store,
    address_id: str = "home",
    time_slot_id: str = "morning",
    payment_method_id: str = "upi",
    now: Optional[datetime] = None,
    rng: random.Random | None = None,
) -> Order:
    """
    Place an order for everything in the cart.

    The cart is cleared and the user's order count incremented once the
    order is recorded.

    Raises:
        EmptyCartError: Nothing in the cart
        InvalidCheckoutOptionError: Unknown address, slot or payment id
    """
    address = _pick(ADDRESSES, address_id, ERROR_INVALID_ADDRESS)
    time_slot = _pick(TIME_SLOTS, time_slot_id, ERROR_INVALID_TIME_SLOT)
    payment_method = _pick(PAYMENT_METHODS, payment_method_id, ERROR_INVALID_PAYMENT_METHOD)
    now = now or datetime.now(timezone.utc)

    with store.locked():
        lines = store.cart
        if not lines:
            raise EmptyCartError()

        order_id = generate_order_id(rng)
        while store.get_order(order_id) is not None:
            order_id = generate_order_id(rng)

        totals = store.totals()
        order = Order(
            id=order_id,
            lines=tuple(lines),
            item_count=totals.item_count,
            subtotal=totals.subtotal,
            delivery_fee=totals.delivery_fee,
            total=totals.final_total,
            payment_method=payment_method,
            time_slot=time_slot,
            address=address,
            placed_at=now,
            estimated_delivery=now + DELIVERY_ETA,
        )
        store.add_order(order)
        store.update_user(orders=store.user.orders + 1)
        store.clear_cart()

    logger.info(f"Order {sanitize_id_for_logging(order.id)} placed: {order.item_count} items, total {order.total}")
    return order


def get_order(store: Store, order_id: str) -> Order:
    order = store.get_order(order_id)
    if order is None:
        raise OrderNotFoundError(order_id)
    return order


def advance_order(store: Store, order_id: str) -> Order:
    """Move an order one step along the status flow. Delivered stays delivered."""
    with store.locked():
        order = get_order(store, order_id)
        if order.is_delivered:
            return order
        next_status = STATUS_FLOW[STATUS_FLOW.index(order.status) + 1]
        order = replace(order, status=next_status)
        store.add_order(order)

    logger.info(f"Order {sanitize_id_for_logging(order.id)} -> {order.status.value}")
    return order


def timeline(order: Order) -> list[dict]:
    """Tracking steps with done/current flags for the track-order screen."""
    position = STATUS_FLOW.index(order.status)
    return [
        {
            "status": status.value,
            "done": index < position or order.is_delivered,
            "current": index == position and not order.is_delivered,
        }
        for index, status in enumerate(STATUS_FLOW)
    ]
