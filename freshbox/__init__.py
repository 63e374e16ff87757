"""
FreshBox Core Module

This package contains the storefront building blocks:
- store: cart/user/catalog state manager and its scope
- cart: cart line models and derived totals
- catalog: static products, categories and browse policy
- orders: checkout options, order placement and tracking
- i18n: translation tables
- routers: FastAPI endpoints consumed by the app screens

Note: Imports are lazy so that importing a leaf module
does not pull in FastAPI.
"""

__all__ = [
    "Store",
    "get_store",
    "store_scope",
]


def __getattr__(name):
    """Lazy attribute access."""
    if name == "Store":
        from freshbox.store import Store
        return Store
    elif name == "get_store":
        from freshbox.store import get_store
        return get_store
    elif name == "store_scope":
        from freshbox.store import store_scope
        return store_scope
    raise AttributeError(f"module 'freshbox' has no attribute '{name}'")
