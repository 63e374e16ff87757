"""
Common Error Constants and Exceptions

Centralized error messages so routers and services report the same text.
"""

# Store errors
ERROR_STORE_NOT_CONFIGURED = "Store accessed outside of its scope"
ERROR_STORE_CLOSED = "Store scope has already been closed"

# Product errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_PRODUCT_OUT_OF_STOCK = "Product out of stock"
ERROR_CATEGORY_NOT_FOUND = "Category not found"

# Checkout errors
ERROR_CART_EMPTY = "Cart is empty"
ERROR_INVALID_ADDRESS = "Unknown delivery address"
ERROR_INVALID_TIME_SLOT = "Unknown delivery time slot"
ERROR_INVALID_PAYMENT_METHOD = "Unknown payment method"

# Order errors
ERROR_ORDER_NOT_FOUND = "Order not found"

# Profile errors
ERROR_UNSUPPORTED_LANGUAGE = "Unsupported language"


class FreshBoxError(Exception):
    """Base class for storefront errors."""


class StoreScopeError(FreshBoxError, RuntimeError):
    """
    The store was used outside the scope that owns it.

    This is a configuration error: callers must not catch it and fall back
    to defaults.
    """


class CheckoutError(FreshBoxError, ValueError):
    """Checkout request cannot be fulfilled."""


class EmptyCartError(CheckoutError):
    """Order placed with nothing in the cart."""

    def __init__(self, message: str = ERROR_CART_EMPTY):
        super().__init__(message)


class InvalidCheckoutOptionError(CheckoutError):
    """Unknown address, time slot or payment method id."""


class OrderNotFoundError(FreshBoxError, LookupError):
    """No order with the given id."""

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"{ERROR_ORDER_NOT_FOUND}: {order_id}")
