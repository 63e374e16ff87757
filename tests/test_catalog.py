"""Tests for catalog data and the browse policy"""
import pytest

from freshbox.catalog import (
    CATEGORIES,
    PRODUCTS,
    SortOrder,
    browse,
    category_products,
    find_category,
    find_product,
    is_orderable,
)


def _ids(products):
    return [p.id for p in products]


def test_static_catalog():
    """Test the catalog loaded at startup"""
    assert _ids(PRODUCTS) == ["1", "2", "3", "4", "5", "6"]
    assert len({c.id for c in CATEGORIES}) == len(CATEGORIES)


def test_find_product():
    assert find_product(PRODUCTS, "3").title == "Green Smoothie Pack"
    assert find_product(PRODUCTS, "missing") is None


def test_out_of_stock_not_orderable():
    assert is_orderable(find_product(PRODUCTS, "1"))
    assert not is_orderable(find_product(PRODUCTS, "6"))


def test_discount_percent():
    assert [p.discount_percent for p in PRODUCTS] == [25, 16, 23, 19, 18, 20]


def test_browse_default_keeps_catalog_order():
    assert _ids(browse(PRODUCTS)) == _ids(PRODUCTS)


def test_browse_category_is_case_insensitive():
    assert _ids(browse(PRODUCTS, category="SMOOTHIE PACKS")) == ["1", "3"]
    assert _ids(browse(PRODUCTS, category="smoothie packs")) == ["1", "3"]


def test_browse_query_matches_title_and_description():
    assert _ids(browse(PRODUCTS, query="smoothie")) == ["1", "3"]
    assert _ids(browse(PRODUCTS, query="  ")) == _ids(PRODUCTS)


def test_browse_in_stock_only():
    assert "6" not in _ids(browse(PRODUCTS, in_stock_only=True))


@pytest.mark.parametrize("sort,expected", [
    (SortOrder.PRICE_ASC, ["6", "4", "3", "5", "2", "1"]),
    (SortOrder.PRICE_DESC, ["1", "2", "5", "3", "4", "6"]),
    (SortOrder.RATING, ["3", "1", "5", "2", "4", "6"]),
    ("discount", ["1", "3", "6", "4", "5", "2"]),
])
def test_browse_sort(sort, expected):
    assert _ids(browse(PRODUCTS, sort=sort)) == expected


def test_browse_rejects_unknown_sort():
    with pytest.raises(ValueError):
        browse(PRODUCTS, sort="newest")


def test_category_products():
    smoothies = find_category(CATEGORIES, "4")
    vegetables = find_category(CATEGORIES, "2")

    assert _ids(category_products(PRODUCTS, smoothies, sort=SortOrder.PRICE_ASC)) == ["3", "1"]
    assert category_products(PRODUCTS, vegetables) == []
    assert find_category(CATEGORIES, "99") is None
