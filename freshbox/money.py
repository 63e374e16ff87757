"""
Money Utilities - Safe Decimal operations for prices and totals.

Avoids float precision issues by using Decimal throughout.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Union

Number = Union[str, int, float, Decimal, None]

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

ZERO = Decimal("0")

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
}


def to_decimal(value: Number) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return ZERO

    if isinstance(value, Decimal):
        return value

    try:
        # Floats go through str() so 14.9 stays 14.9
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return ZERO


def round_money(value: Number) -> Decimal:
    """Round a monetary value to cents."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def add(a: Number, b: Number) -> Decimal:
    """Safe addition of monetary values."""
    return to_decimal(a) + to_decimal(b)


def subtract(a: Number, b: Number) -> Decimal:
    """Safe subtraction of monetary values."""
    return to_decimal(a) - to_decimal(b)


def multiply(value: Number, factor: Number) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def to_float(value: Number) -> float:
    """
    Convert Decimal to float for JSON responses.

    Use only at API boundaries, not for internal calculations.
    """
    return float(to_decimal(value))


def format_money(value: Number, currency: str = "USD") -> str:
    """
    Format monetary value with currency symbol.

    Args:
        value: Value to format
        currency: Currency code (USD, EUR, INR, ...)

    Returns:
        Formatted string, e.g. "$14.90" or "14.90 CHF"
    """
    symbol = CURRENCY_SYMBOLS.get(currency)
    formatted = f"{round_money(value):,.2f}"
    if symbol is None:
        return f"{formatted} {currency}"
    return f"{symbol}{formatted}"
