"""Translation tables for storefront UI strings."""

import json
from pathlib import Path
from typing import Any

from freshbox.logging import get_logger

logger = get_logger(__name__)

# Supported languages with their names
SUPPORTED_LANGUAGES = {
    "en": "English",
    "hi": "हिन्दी",
}

DEFAULT_LANGUAGE = "en"

LOCALES_PATH = Path(__file__).parent.parent / "locales"

# Cache for loaded translations
_translations: dict[str, dict[str, Any]] = {}


def _normalize(lang: str | None) -> str:
    # "hi-IN" -> "hi"
    return lang.split("-")[0].lower() if lang else DEFAULT_LANGUAGE


def _load_translations(lang: str) -> dict[str, Any]:
    """Load translations for a language, falling back to the default table."""
    if lang in _translations:
        return _translations[lang]

    file_path = LOCALES_PATH / f"{lang}.json"
    if not file_path.exists():
        if lang != DEFAULT_LANGUAGE:
            return _load_translations(DEFAULT_LANGUAGE)
        logger.warning(f"Default locale file missing: {file_path}")
        return {}

    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        logger.warning(f"Locale file {file_path} is not a JSON object")
        data = {}
    _translations[lang] = data
    return data


def _lookup(translations: dict[str, Any], key: str) -> Any:
    # Nested keys use dot notation ("checkout.place_order")
    current: Any = translations
    for part in key.split("."):
        if not isinstance(current, dict) or part not in current:
            return None
        current = current[part]
    return current


def is_supported(lang: str | None) -> bool:
    return _normalize(lang) in SUPPORTED_LANGUAGES


def detect_language(language_code: str | None) -> str:
    """
    Normalize a language tag to a supported language.

    Args:
        language_code: Tag such as "hi", "en-US" or None

    Returns:
        Supported language code, DEFAULT_LANGUAGE otherwise
    """
    lang = _normalize(language_code)
    return lang if lang in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


def get_text(key: str, lang: str = DEFAULT_LANGUAGE, default: str | None = None, **kwargs) -> str:
    """
    Get translated text by key.

    Args:
        key: Translation key (e.g., "cart.title", "free_delivery_hint")
        lang: Language code; unknown languages use the default table
        default: Returned instead of the key when nothing matches
        **kwargs: Variables to format into the string

    Returns:
        Translated string or key/default if not found
    """
    lang = detect_language(lang)

    text = _lookup(_load_translations(lang), key)

    if text is None and lang != DEFAULT_LANGUAGE:
        text = _lookup(_load_translations(DEFAULT_LANGUAGE), key)

    # Missing, or a partial key pointing at a nested table
    if not isinstance(text, str):
        return default if default is not None else key

    if kwargs:
        try:
            return text.format(**kwargs)
        except (KeyError, ValueError, IndexError):
            return text

    return text


def get_all_texts(lang: str = DEFAULT_LANGUAGE) -> dict[str, Any]:
    """Get all translations for a language."""
    return _load_translations(detect_language(lang))
