"""In-memory cart manager."""
from freshbox.logging import get_logger, sanitize_id_for_logging
from freshbox.models import Product
from .models import Cart, CartLine

logger = get_logger(__name__)


class CartManager:
    """
    Applies cart operations to a single in-memory cart.

    Operations never raise for missing lines or out-of-range quantities:
    missing ids are ignored and quantities are clamped at zero. Stock is not
    checked here; callers gate out-of-stock products before adding.
    """

    def __init__(self, cart: Cart | None = None):
        self.cart = cart if cart is not None else Cart()

    def add_item(self, product: Product) -> Cart:
        """Add one unit of ``product``; appends a new line on first add."""
        existing = self.cart.find(product.id)
        if existing:
            existing.quantity += 1
        else:
            self.cart.lines.append(CartLine(product=product, quantity=1))
        logger.debug(f"Cart add {sanitize_id_for_logging(product.id)}")
        return self.cart

    def update_item_quantity(self, product_id: str, new_quantity: int) -> Cart:
        """Set quantity (clamped at 0). Zero removes the line."""
        line = self.cart.find(product_id)
        if line is None:
            return self.cart

        quantity = max(0, int(new_quantity))
        if quantity == 0:
            self.cart.lines.remove(line)
        else:
            line.quantity = quantity
        logger.debug(f"Cart set {sanitize_id_for_logging(product_id)} -> {quantity}")
        return self.cart

    def remove_item(self, product_id: str) -> Cart:
        """Remove the line for ``product_id`` if present."""
        self.cart.lines = [line for line in self.cart.lines if line.product_id != product_id]
        return self.cart

    def clear_cart(self) -> Cart:
        self.cart.lines = []
        return self.cart
