"""
FastAPI Routers Package

Endpoints consumed by the storefront screens. All routers are included
in api/index.py under the /api prefix.
"""

from freshbox.routers.cart import router as cart_router
from freshbox.routers.catalog import router as catalog_router
from freshbox.routers.orders import router as orders_router
from freshbox.routers.profile import router as profile_router
from freshbox.routers.status import router as status_router

__all__ = [
    "cart_router",
    "catalog_router",
    "orders_router",
    "profile_router",
    "status_router",
]
