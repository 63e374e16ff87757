"""
UI Status Router

Loading and error flags that screens toggle around simulated async work.
"""
from fastapi import APIRouter, Depends

from freshbox.store import Store
from .deps import get_app_store
from .models import SetErrorRequest, SetLoadingRequest

router = APIRouter(tags=["status"])


@router.get("/status")
async def get_status(store: Store = Depends(get_app_store)):
    return store.status.model_dump()


@router.put("/status/loading")
async def set_loading(request: SetLoadingRequest, store: Store = Depends(get_app_store)):
    store.set_loading(request.loading)
    return store.status.model_dump()


@router.put("/status/error")
async def set_error(request: SetErrorRequest, store: Store = Depends(get_app_store)):
    """Set or clear (message=null) the error. Also clears loading."""
    store.set_error(request.message)
    return store.status.model_dump()
