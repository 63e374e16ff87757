"""
Catalog

Static products and categories loaded at startup, plus the single browse
policy (filter + sort) used by every product listing.
"""

from enum import Enum
from typing import Iterable

from freshbox.models import Category, Product


class SortOrder(str, Enum):
    """Product list orderings."""
    FEATURED = "featured"  # Catalog order
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    RATING = "rating"
    DISCOUNT = "discount"


PRODUCTS: tuple[Product, ...] = (
    Product(
        id="1",
        title="Berry Blast Mix",
        price="14.90",
        original_price="19.90",
        image="https://i.ibb.co/2nKz4VJ/berry.jpg",
        category="Smoothie Packs",
        description="Fresh mixed berries perfect for smoothies",
        in_stock=True,
        rating="4.5",
        reviews=128,
    ),
    Product(
        id="2",
        title="Tropical Fruit Mix",
        price="12.50",
        original_price="15.00",
        image="https://picsum.photos/400/400?fruit1",
        category="Fresh Cut Fruits",
        description="Exotic tropical fruits ready to eat",
        in_stock=True,
        rating="4.3",
        reviews=95,
    ),
    Product(
        id="3",
        title="Green Smoothie Pack",
        price="9.99",
        original_price="12.99",
        image="https://picsum.photos/400/400?fruit2",
        category="Smoothie Packs",
        description="Kale, spinach, and green apple mix",
        in_stock=True,
        rating="4.7",
        reviews=203,
    ),
    Product(
        id="4",
        title="Chopped Salad Mix",
        price="8.50",
        original_price="10.50",
        image="https://picsum.photos/400/400?fruit3",
        category="Salad Mixes",
        description="Fresh lettuce, tomatoes, and cucumbers",
        in_stock=True,
        rating="4.2",
        reviews=87,
    ),
    Product(
        id="5",
        title="Stir Fry Vegetables",
        price="11.25",
        original_price="13.75",
        image="https://picsum.photos/400/400?fruit4",
        category="Stir Fry Mixes",
        description="Pre-cut vegetables for quick stir frying",
        in_stock=True,
        rating="4.4",
        reviews=156,
    ),
    Product(
        id="6",
        title="Soup Starter Pack",
        price="7.99",
        original_price="9.99",
        image="https://picsum.photos/400/400?fruit5",
        category="Soup Ingredients",
        description="Onions, carrots, celery ready for soup",
        in_stock=False,
        rating="4.1",
        reviews=73,
    ),
)

CATEGORIES: tuple[Category, ...] = (
    Category(id="1", title="FRESH CUT FRUITS", image="https://picsum.photos/400/400?fruit1"),
    Category(id="2", title="CHOPPED VEGETABLES", image="https://picsum.photos/400/400?fruit2"),
    Category(id="3", title="SALAD MIXES", image="https://picsum.photos/400/400?fruit3"),
    Category(id="4", title="SMOOTHIE PACKS", image="https://picsum.photos/400/400?fruit4"),
    Category(id="5", title="STIR FRY MIXES", image="https://picsum.photos/400/400?fruit5"),
    Category(id="6", title="SOUP INGREDIENTS", image="https://picsum.photos/400/400?fruit6"),
)


def find_product(products: Iterable[Product], product_id: str) -> Product | None:
    return next((p for p in products if p.id == product_id), None)


def find_category(categories: Iterable[Category], category_id: str) -> Category | None:
    return next((c for c in categories if c.id == category_id), None)


def is_orderable(product: Product) -> bool:
    """Out-of-stock products are shown but cannot be added to the cart."""
    return product.in_stock


def _matches_category(product: Product, category: str) -> bool:
    # Categories are upper-case ("SMOOTHIE PACKS"), products title-case
    return product.category.casefold() == category.strip().casefold()


def _matches_query(product: Product, query: str) -> bool:
    needle = query.strip().casefold()
    return needle in product.title.casefold() or needle in product.description.casefold()


def browse(
    products: Iterable[Product],
    category: str | None = None,
    query: str | None = None,
    in_stock_only: bool = False,
    sort: SortOrder | str = SortOrder.FEATURED,
) -> list[Product]:
    """
    Filter and sort products.

    Args:
        products: Products in catalog order
        category: Category label, case-insensitive (None = all)
        query: Substring matched against title and description
        in_stock_only: Drop out-of-stock products
        sort: One of SortOrder; ties keep catalog order

    Returns:
        New list of matching products
    """
    sort = SortOrder(sort)
    result = list(products)

    if category:
        result = [p for p in result if _matches_category(p, category)]
    if query and query.strip():
        result = [p for p in result if _matches_query(p, query)]
    if in_stock_only:
        result = [p for p in result if p.in_stock]

    # sorted() is stable, so equal keys stay in catalog order
    if sort == SortOrder.PRICE_ASC:
        result = sorted(result, key=lambda p: p.price)
    elif sort == SortOrder.PRICE_DESC:
        result = sorted(result, key=lambda p: p.price, reverse=True)
    elif sort == SortOrder.RATING:
        result = sorted(result, key=lambda p: p.rating, reverse=True)
    elif sort == SortOrder.DISCOUNT:
        result = sorted(result, key=lambda p: p.discount_percent, reverse=True)

    return result


def category_products(
    products: Iterable[Product],
    category: Category,
    sort: SortOrder | str = SortOrder.FEATURED,
) -> list[Product]:
    """Products listed under a category screen."""
    return browse(products, category=category.title, sort=sort)
