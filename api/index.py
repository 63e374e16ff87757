"""
FreshBox Storefront - Main FastAPI Application

Single entry point for all storefront API routes. The store is created in
the lifespan handler and torn down on shutdown.
"""
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from freshbox.config import get_settings
from freshbox.logging import get_logger
from freshbox.routers import (
    cart_router,
    catalog_router,
    orders_router,
    profile_router,
    status_router,
)
from freshbox.store import Store

logger = get_logger(__name__)


def _default_store() -> Store:
    return Store(settings=get_settings())


def create_app(store_factory: Callable[[], Store] = _default_store) -> FastAPI:
    """
    Build the application.

    Args:
        store_factory: Creates the store when the app starts
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler"""
        # Startup
        store = store_factory()
        app.state.store = store
        logger.info("Store created")
        yield
        # Shutdown
        app.state.store = None
        store.close()
        logger.info("Store closed")

    app = FastAPI(
        title="FreshBox Storefront",
        description="Cart, catalog and order API for the FreshBox mobile app",
        version="1.0.0",
        lifespan=lifespan,
    )

    # The mobile app and Expo web preview call from arbitrary origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(catalog_router, prefix="/api")
    app.include_router(cart_router, prefix="/api")
    app.include_router(profile_router, prefix="/api")
    app.include_router(status_router, prefix="/api")
    app.include_router(orders_router, prefix="/api")

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "ok", "service": "freshbox"}

    return app


app = create_app()
