"""
Cart Router

Shopping cart endpoints. Every response carries the cart lines together
with freshly computed totals.
"""
from fastapi import APIRouter, Depends, HTTPException

from freshbox.catalog import find_product, is_orderable
from freshbox.errors import ERROR_PRODUCT_NOT_FOUND, ERROR_PRODUCT_OUT_OF_STOCK
from freshbox.logging import get_logger, sanitize_id_for_logging
from freshbox.money import format_money
from freshbox.store import Store
from .deps import get_app_store
from .models import AddToCartRequest, UpdateCartItemRequest

logger = get_logger(__name__)

router = APIRouter(tags=["cart"])


def _format_cart_response(store: Store) -> dict:
    """
    Build cart response.

    Amounts are floats for calculations; the hint is a localized string
    for the "add X more for free delivery" banner (None when delivery is free).
    """
    snapshot = store.snapshot()
    totals = snapshot.totals
    hint = None
    if totals.amount_to_free_delivery > 0:
        hint = store.t(
            "cart.free_delivery_hint",
            amount=format_money(totals.amount_to_free_delivery, store.settings.currency),
        )
    return {
        "items": [line.to_dict() for line in snapshot.cart],
        **totals.to_dict(),
        "currency": store.settings.currency,
        "free_delivery_hint": hint,
    }


@router.get("/cart")
async def get_cart(store: Store = Depends(get_app_store)):
    return _format_cart_response(store)


@router.post("/cart/add")
async def add_to_cart(request: AddToCartRequest, store: Store = Depends(get_app_store)):
    """Add ``quantity`` units of a product (out-of-stock products are rejected)."""
    product = find_product(store.products, request.product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    if not is_orderable(product):
        raise HTTPException(status_code=400, detail=ERROR_PRODUCT_OUT_OF_STOCK)

    with store.locked():
        for _ in range(request.quantity):
            store.add_to_cart(product)

    logger.info(f"Added {request.quantity} x {sanitize_id_for_logging(product.id)} to cart")
    return _format_cart_response(store)


@router.patch("/cart/item")
async def update_cart_item(request: UpdateCartItemRequest, store: Store = Depends(get_app_store)):
    """Update cart item quantity (0 = remove). Unknown ids are ignored."""
    store.update_quantity(request.product_id, request.quantity)
    return _format_cart_response(store)


@router.delete("/cart/item")
async def remove_cart_item(product_id: str, store: Store = Depends(get_app_store)):
    store.remove_from_cart(product_id)
    return _format_cart_response(store)


@router.post("/cart/clear")
async def clear_cart(store: Store = Depends(get_app_store)):
    store.clear_cart()
    return _format_cart_response(store)
