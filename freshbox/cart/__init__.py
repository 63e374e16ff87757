"""Cart package: line models, totals, and the in-memory cart manager."""
from .models import CartLine, Cart, CartTotals
from .service import CartManager

__all__ = [
    "CartLine",
    "Cart",
    "CartTotals",
    "CartManager",
]
