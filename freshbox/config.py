"""Storefront settings read from the environment."""
import os
from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from freshbox.money import to_decimal

_ENV_PATH = Path(__file__).parent.parent / ".env"


class Settings(BaseModel):
    """Pricing and locale settings shared by the store and routers."""
    free_delivery_threshold: Decimal = Decimal("50.00")
    delivery_fee: Decimal = Decimal("4.99")
    default_language: str = "en"
    currency: str = "USD"

    model_config = {"frozen": True}

    @field_validator("free_delivery_threshold", "delivery_fee", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        return to_decimal(v)

    @field_validator("default_language", mode="before")
    @classmethod
    def normalize_language(cls, v):
        return str(v).split("-")[0].lower() if v else "en"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables, keeping defaults for unset ones."""
        values = {
            "free_delivery_threshold": os.environ.get("FREE_DELIVERY_THRESHOLD"),
            "delivery_fee": os.environ.get("DELIVERY_FEE"),
            "default_language": os.environ.get("DEFAULT_LANGUAGE"),
            "currency": os.environ.get("CURRENCY"),
        }
        return cls(**{k: v for k, v in values.items() if v})


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get settings (cached). Loads .env from the project root when present."""
    if _ENV_PATH.exists():
        load_dotenv(_ENV_PATH)
    return Settings.from_env()
