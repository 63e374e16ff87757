"""Storefront Models - Pydantic models for catalog, profile and UI status."""
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from freshbox.money import to_decimal as _to_decimal, ZERO


class Product(BaseModel):
    """Catalog product. Reference data, never mutated at runtime."""
    id: str
    title: str
    price: Decimal
    original_price: Decimal = ZERO
    image: str = ""
    category: str
    description: str = ""
    in_stock: bool = True
    rating: Decimal = ZERO
    reviews: int = 0

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("price", "original_price", "rating", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return _to_decimal(v)

    @property
    def discount_percent(self) -> int:
        """Whole percent off the original price (0 when not discounted)."""
        if self.original_price <= self.price or self.original_price <= 0:
            return 0
        return int((self.original_price - self.price) * 100 / self.original_price)


class Category(BaseModel):
    """Browse category shown on the categories screen."""
    id: str
    title: str
    image: str = ""

    model_config = {"frozen": True}


class User(BaseModel):
    """User profile. Immutable; changes go through ``merged``."""
    name: str
    email: str
    avatar: str = ""
    orders: int = Field(default=0, ge=0)
    addresses: int = Field(default=0, ge=0)
    language: str = "en"

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("language", mode="before")
    @classmethod
    def normalize_language(cls, v):
        # "en-US" -> "en"
        return str(v).split("-")[0].lower() if v else "en"

    def merged(self, fields: dict) -> "User":
        """Return a copy with ``fields`` shallow-merged in (validated)."""
        return User.model_validate({**self.model_dump(), **fields})


class UIStatus(BaseModel):
    """Loading/error flags toggled by screens around async actions."""
    loading: bool = False
    error: Optional[str] = None

    model_config = {"frozen": True}
