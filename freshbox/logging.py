"""
Logging setup for the storefront.

Usage:
    from freshbox.logging import get_logger
    logger = get_logger(__name__)

    logger.info(f"Order {sanitize_id_for_logging(order.id)} placed")

Store mutations log at DEBUG, checkout at INFO and scope errors at ERROR.
Ids and free text that come from requests go through the sanitizers first.
"""

import logging
import os
import sys
from functools import cache

_DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_PRODUCTION_FORMAT = "%(levelname)s - %(name)s - %(message)s"

# Longest id we log whole: order ids are "#ORD" + 5 digits, product ids are shorter
ID_LOG_LENGTH = 12


def _level_from_env() -> int:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def configure_logging() -> None:
    """
    Attach a stdout handler to the root logger.

    Does nothing when the root logger already has handlers (uvicorn, pytest).
    FRESHBOX_ENV=production drops the timestamp, the platform adds its own.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    level = _level_from_env()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    production = os.environ.get("FRESHBOX_ENV") == "production"
    handler.setFormatter(logging.Formatter(_PRODUCTION_FORMAT if production else _DETAILED_FORMAT))
    root.addHandler(handler)


configure_logging()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _escape_control_chars(value: str) -> str:
    """Keep request values on one log line (CWE-117)."""
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_id_for_logging(id_value: str | None) -> str:
    """
    Product or order id, escaped and capped at ID_LOG_LENGTH characters.

    Returns "N/A" for empty ids.
    """
    if not id_value:
        return "N/A"
    return _escape_control_chars(str(id_value))[:ID_LOG_LENGTH]


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Free text (error messages, language tags, field names), escaped and
    truncated with "..." past ``max_length``.
    """
    if not value:
        return "N/A"
    safe_value = _escape_control_chars(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "ID_LOG_LENGTH",
    "configure_logging",
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
