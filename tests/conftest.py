"""Pytest configuration and fixtures"""
import pytest
from fastapi.testclient import TestClient

from api.index import create_app
from freshbox.catalog import PRODUCTS
from freshbox.config import Settings
from freshbox.models import Product
from freshbox.store import Store


@pytest.fixture
def settings():
    """Default pricing: free delivery over 50.00, otherwise 4.99"""
    return Settings()


@pytest.fixture
def store(settings):
    """Fresh store with the static catalog"""
    s = Store(settings=settings)
    yield s
    if not s.closed:
        s.close()


@pytest.fixture
def berry_mix():
    """Berry Blast Mix, 14.90"""
    return PRODUCTS[0]


@pytest.fixture
def green_pack():
    """Green Smoothie Pack, 9.99"""
    return PRODUCTS[2]


@pytest.fixture
def soup_pack():
    """Soup Starter Pack, out of stock"""
    return PRODUCTS[5]


@pytest.fixture
def make_product():
    """Factory for ad-hoc products with a given price"""
    def _make(product_id: str, price: str) -> Product:
        return Product(id=product_id, title=f"Test {product_id}", price=price, category="Test")
    return _make


@pytest.fixture
def client(settings):
    """Test client with the app lifespan running"""
    app = create_app(store_factory=lambda: Store(settings=settings))
    with TestClient(app) as test_client:
        yield test_client
