"""Tests for i18n translations"""
from freshbox.i18n import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, detect_language, get_all_texts, get_text


def test_supported_languages():
    """Test that both languages are available"""
    assert set(SUPPORTED_LANGUAGES) == {"en", "hi"}
    assert DEFAULT_LANGUAGE == "en"


def test_get_text_existing_key():
    assert get_text("cart.title", "en") == "My Cart"
    assert get_text("cart.title", "hi") == "मेरी कार्ट"


def test_missing_key_in_language_falls_back_to_default():
    """hi has no free delivery hint, so English is used"""
    text = get_text("cart.free_delivery_hint", "hi", amount="$5.30")
    assert text == "Add $5.30 more for free delivery!"


def test_unknown_key_returns_key():
    assert get_text("non_existent_key", "hi") == "non_existent_key"
    assert get_text("non_existent_key", "en", default="") == ""


def test_partial_key_returns_key():
    assert get_text("cart", "en") == "cart"


def test_unknown_language_uses_default_table():
    assert get_text("cart.title", "fr") == "My Cart"
    assert get_text("cart.title", None) == "My Cart"


def test_get_text_with_params():
    assert get_text("welcome", "en", name="Sarah") == "Welcome back, Sarah!"
    # Missing placeholder values leave the template as is
    assert get_text("welcome", "en") == "Welcome back, {name}!"


def test_detect_language():
    assert detect_language("hi-IN") == "hi"
    assert detect_language("EN") == "en"
    assert detect_language("de") == "en"
    assert detect_language(None) == "en"


def test_all_languages_have_order_statuses():
    for lang in SUPPORTED_LANGUAGES:
        statuses = get_all_texts(lang)["order"]["status"]
        assert set(statuses) == {"confirmed", "processing", "out_for_delivery", "delivered"}
