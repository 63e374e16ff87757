"""
Catalog Router

Product listings, product detail and categories.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from freshbox.catalog import SortOrder, browse, category_products, find_category, find_product
from freshbox.errors import ERROR_CATEGORY_NOT_FOUND, ERROR_PRODUCT_NOT_FOUND
from freshbox.money import to_float
from freshbox.models import Product
from freshbox.store import Store
from .deps import get_app_store

router = APIRouter(tags=["catalog"])


def _product_response(product: Product) -> dict:
    data = product.model_dump()
    data.update({
        "price": to_float(product.price),
        "original_price": to_float(product.original_price),
        "rating": to_float(product.rating),
        "discount_percent": product.discount_percent,
    })
    return data


@router.get("/products")
async def list_products(
    category: Optional[str] = None,
    q: Optional[str] = None,
    in_stock: bool = False,
    sort: SortOrder = SortOrder.FEATURED,
    store: Store = Depends(get_app_store),
):
    """List products filtered and sorted by the browse policy."""
    products = browse(store.products, category=category, query=q, in_stock_only=in_stock, sort=sort)
    return [_product_response(p) for p in products]


@router.get("/products/{product_id}")
async def get_product(product_id: str, store: Store = Depends(get_app_store)):
    product = find_product(store.products, product_id)
    if not product:
        raise HTTPException(status_code=404, detail=ERROR_PRODUCT_NOT_FOUND)
    return _product_response(product)


@router.get("/categories")
async def list_categories(store: Store = Depends(get_app_store)):
    return [c.model_dump() for c in store.categories]


@router.get("/categories/{category_id}/products")
async def list_category_products(
    category_id: str,
    sort: SortOrder = SortOrder.FEATURED,
    store: Store = Depends(get_app_store),
):
    category = find_category(store.categories, category_id)
    if not category:
        raise HTTPException(status_code=404, detail=ERROR_CATEGORY_NOT_FOUND)
    return {
        "category": category.model_dump(),
        "products": [_product_response(p) for p in category_products(store.products, category, sort)],
    }
