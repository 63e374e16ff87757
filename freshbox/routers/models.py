"""
Request Models

Pydantic bodies shared by the storefront endpoints.
"""
from typing import Optional

from pydantic import BaseModel, Field


# ==================== CART MODELS ====================

class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(default=1, ge=1, le=99)


class UpdateCartItemRequest(BaseModel):
    product_id: str
    quantity: int  # <= 0 removes the line


# ==================== PROFILE MODELS ====================

class UpdateProfileRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    avatar: Optional[str] = None
    addresses: Optional[int] = Field(default=None, ge=0)


class SetLanguageRequest(BaseModel):
    language: str


# ==================== STATUS MODELS ====================

class SetLoadingRequest(BaseModel):
    loading: bool


class SetErrorRequest(BaseModel):
    message: Optional[str] = None


# ==================== ORDER MODELS ====================

class PlaceOrderRequest(BaseModel):
    address_id: str = "home"
    time_slot_id: str = "morning"
    payment_method_id: str = "upi"
