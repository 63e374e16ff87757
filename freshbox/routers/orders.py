"""
Checkout & Orders Router

Delivery/payment options, order placement and order tracking.
"""
from fastapi import APIRouter, Depends, HTTPException

from freshbox.errors import CheckoutError, OrderNotFoundError
from freshbox.logging import get_logger
from freshbox.orders import ADDRESSES, PAYMENT_METHODS, TIME_SLOTS, advance_order, get_order, place_order
from freshbox.store import Store
from .deps import get_app_store
from .models import PlaceOrderRequest

logger = get_logger(__name__)

router = APIRouter(tags=["orders"])


@router.get("/checkout/options")
async def get_checkout_options(store: Store = Depends(get_app_store)):
    """Options for the delivery/payment screen plus current totals."""
    return {
        "addresses": [o.to_dict() for o in ADDRESSES],
        "time_slots": [o.to_dict() for o in TIME_SLOTS],
        "payment_methods": [o.to_dict() for o in PAYMENT_METHODS],
        "totals": store.totals().to_dict(),
    }


@router.post("/orders", status_code=201)
async def create_order(request: PlaceOrderRequest, store: Store = Depends(get_app_store)):
    try:
        order = place_order(
            store,
            address_id=request.address_id,
            time_slot_id=request.time_slot_id,
            payment_method_id=request.payment_method_id,
        )
    except CheckoutError as e:
        logger.warning(f"Checkout rejected: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return order.to_dict()


@router.get("/orders")
async def list_orders(store: Store = Depends(get_app_store)):
    return [order.to_dict() for order in store.orders]


@router.get("/orders/{order_id}")
async def get_order_details(order_id: str, store: Store = Depends(get_app_store)):
    try:
        return get_order(store, order_id).to_dict()
    except OrderNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/orders/{order_id}/advance")
async def advance_order_status(order_id: str, store: Store = Depends(get_app_store)):
    try:
        return advance_order(store, order_id).to_dict()
    except OrderNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
