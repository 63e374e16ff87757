"""Cart models with Decimal-based pricing."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from freshbox.models import Product
from freshbox.money import MONEY_PRECISION, ZERO, add, multiply, round_money, subtract, to_float


@dataclass
class CartLine:
    """One product in the cart together with its quantity."""
    product: Product
    quantity: int = 1

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def unit_price(self) -> Decimal:
        return self.product.price

    @property
    def total_price(self) -> Decimal:
        """Total price for all units."""
        return round_money(multiply(self.product.price, self.quantity))

    def to_dict(self) -> dict:
        """Product fields plus quantity, amounts as floats."""
        data = self.product.model_dump()
        data.update({
            "price": to_float(self.product.price),
            "original_price": to_float(self.product.original_price),
            "rating": to_float(self.product.rating),
            "discount_percent": self.product.discount_percent,
            "quantity": self.quantity,
            "total_price": to_float(self.total_price),
        })
        return data


@dataclass
class Cart:
    """Shopping cart. Lines keep the order products were first added in."""
    lines: List[CartLine] = field(default_factory=list)

    def find(self, product_id: str) -> Optional[CartLine]:
        return next((line for line in self.lines if line.product_id == product_id), None)

    @property
    def total_items(self) -> int:
        """Total number of units in cart."""
        return sum(line.quantity for line in self.lines)

    @property
    def subtotal(self) -> Decimal:
        """Sum of price x quantity over all lines."""
        return round_money(sum((line.total_price for line in self.lines), ZERO))

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def to_dict(self) -> dict:
        return {"items": [line.to_dict() for line in self.lines]}


@dataclass(frozen=True)
class CartTotals:
    """Derived totals. Built fresh from a cart on every read."""
    subtotal: Decimal
    item_count: int
    delivery_fee: Decimal
    final_total: Decimal
    amount_to_free_delivery: Decimal

    @classmethod
    def from_cart(
        cls,
        cart: Cart,
        free_delivery_threshold: Decimal,
        delivery_fee: Decimal,
    ) -> "CartTotals":
        """
        Compute totals for a cart.

        Delivery is free only when the subtotal is strictly above the
        threshold, so the amount still missing includes one extra cent.
        """
        subtotal = cart.subtotal
        charged = subtotal <= free_delivery_threshold and delivery_fee > 0
        fee = round_money(delivery_fee) if charged else ZERO
        missing = ZERO
        if charged:
            missing = round_money(add(subtract(free_delivery_threshold, subtotal), MONEY_PRECISION))
        return cls(
            subtotal=subtotal,
            item_count=cart.total_items,
            delivery_fee=fee,
            final_total=round_money(add(subtotal, fee)),
            amount_to_free_delivery=missing,
        )

    def to_dict(self) -> dict:
        return {
            "subtotal": to_float(self.subtotal),
            "item_count": self.item_count,
            "delivery_fee": to_float(self.delivery_fee),
            "final_total": to_float(self.final_total),
            "amount_to_free_delivery": to_float(self.amount_to_free_delivery),
        }
