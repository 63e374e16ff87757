"""
Shared Dependencies for Routers

The store is created by the app lifespan and injected into every route.
"""

from fastapi import Request

from freshbox.errors import ERROR_STORE_CLOSED, ERROR_STORE_NOT_CONFIGURED, StoreScopeError
from freshbox.logging import get_logger
from freshbox.store import Store

logger = get_logger(__name__)


def get_app_store(request: Request) -> Store:
    """
    Store owned by the running application.

    Raises:
        StoreScopeError: The app was not started through its lifespan, or
            has already shut down. Not converted to an HTTP error.
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        logger.error(f"{ERROR_STORE_NOT_CONFIGURED}: {request.url.path}")
        raise StoreScopeError(ERROR_STORE_NOT_CONFIGURED)
    if store.closed:
        logger.error(f"{ERROR_STORE_CLOSED}: {request.url.path}")
        raise StoreScopeError(ERROR_STORE_CLOSED)
    return store
