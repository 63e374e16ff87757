"""
Storefront State Store

The single source of cross-screen state: cart, user profile, catalog,
categories, UI status and placed orders. Screens read snapshots and call
named operations; totals are recomputed on every read.

A store is owned by a scope:

    with store_scope() as store:
        store.add_to_cart(product)
        get_store() is store  # True inside the block

Using a store outside its scope raises StoreScopeError.
"""

import dataclasses
import threading
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, Iterator, Optional

from pydantic import ValidationError

from freshbox.cart import CartLine, CartManager, CartTotals
from freshbox.catalog import CATEGORIES, PRODUCTS
from freshbox.config import Settings, get_settings
from freshbox.errors import ERROR_STORE_CLOSED, ERROR_STORE_NOT_CONFIGURED, StoreScopeError
from freshbox.i18n import detect_language, get_text
from freshbox.logging import get_logger, sanitize_id_for_logging, sanitize_string_for_logging
from freshbox.models import Category, Product, UIStatus, User

if TYPE_CHECKING:
    from freshbox.orders import Order

logger = get_logger(__name__)

DEFAULT_USER = User(
    name="Sarah Johnson",
    email="sarah.j@email.com",
    avatar="https://via.placeholder.com/80x80/4A90E2/FFFFFF?text=SJ",
    orders=5,
    addresses=2,
)


@dataclass(frozen=True)
class StoreSnapshot:
    """Read-only view of the store at one point in time."""
    cart: tuple[CartLine, ...]
    user: User
    products: tuple[Product, ...]
    categories: tuple[Category, ...]
    status: UIStatus
    totals: CartTotals

    def to_dict(self) -> dict:
        return {
            "cart": [line.to_dict() for line in self.cart],
            "user": self.user.model_dump(),
            "status": self.status.model_dump(),
            "totals": self.totals.to_dict(),
        }


class Store:
    """
    Cart/user/catalog state with named operations.

    Every operation is total: unknown product ids and profile fields are
    ignored, invalid profile values are dropped and quantities are clamped.
    Operations run one at a time under a re-entrant lock.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        products: Iterable[Product] = PRODUCTS,
        categories: Iterable[Category] = CATEGORIES,
        user: User | None = None,
    ):
        self.settings = settings or get_settings()
        self._products = tuple(products)
        self._categories = tuple(categories)
        base_user = user or DEFAULT_USER.merged({"language": self.settings.default_language})
        self._user = base_user
        self._status = UIStatus()
        self._cart = CartManager()
        self._orders: dict[str, "Order"] = {}
        self._lock = threading.RLock()
        self._closed = False

    # ==================== LIFECYCLE ====================

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """End the store's lifetime. Later access raises StoreScopeError."""
        with self._lock:
            self._closed = True
            self._cart.clear_cart()
            self._orders.clear()
        logger.debug("Store closed")

    def _ensure_open(self) -> None:
        if self._closed:
            logger.error(ERROR_STORE_CLOSED)
            raise StoreScopeError(ERROR_STORE_CLOSED)

    @contextmanager
    def locked(self) -> Iterator["Store"]:
        """Hold the store lock across several operations."""
        with self._lock:
            self._ensure_open()
            yield self

    # ==================== READ ====================

    @property
    def cart(self) -> list[CartLine]:
        """Copies of the current cart lines, in insertion order."""
        with self.locked():
            return [dataclasses.replace(line) for line in self._cart.cart.lines]

    @property
    def user(self) -> User:
        with self.locked():
            return self._user

    @property
    def products(self) -> tuple[Product, ...]:
        self._ensure_open()
        return self._products

    @property
    def categories(self) -> tuple[Category, ...]:
        self._ensure_open()
        return self._categories

    @property
    def status(self) -> UIStatus:
        with self.locked():
            return self._status

    def totals(self) -> CartTotals:
        """Derived totals, computed from the current cart."""
        with self.locked():
            return CartTotals.from_cart(
                self._cart.cart,
                free_delivery_threshold=self.settings.free_delivery_threshold,
                delivery_fee=self.settings.delivery_fee,
            )

    @property
    def subtotal(self) -> Decimal:
        return self.totals().subtotal

    @property
    def item_count(self) -> int:
        return self.totals().item_count

    @property
    def delivery_fee(self) -> Decimal:
        return self.totals().delivery_fee

    @property
    def final_total(self) -> Decimal:
        return self.totals().final_total

    @property
    def amount_to_free_delivery(self) -> Decimal:
        return self.totals().amount_to_free_delivery

    def snapshot(self) -> StoreSnapshot:
        with self.locked():
            return StoreSnapshot(
                cart=tuple(self.cart),
                user=self._user,
                products=self._products,
                categories=self._categories,
                status=self._status,
                totals=self.totals(),
            )

    # ==================== CART ====================

    def add_to_cart(self, product: Product) -> None:
        """Add one unit of ``product``. No stock check at this layer."""
        with self.locked():
            self._cart.add_item(product)

    def remove_from_cart(self, product_id: str) -> None:
        with self.locked():
            self._cart.remove_item(product_id)
        logger.debug(f"Removed {sanitize_id_for_logging(product_id)} from cart")

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """Set a line's quantity; values <= 0 remove the line."""
        with self.locked():
            self._cart.update_item_quantity(product_id, quantity)

    def clear_cart(self) -> None:
        with self.locked():
            self._cart.clear_cart()
        logger.debug("Cart cleared")

    # ==================== UI STATUS ====================

    def set_loading(self, loading: bool) -> None:
        with self.locked():
            self._status = UIStatus(loading=bool(loading), error=self._status.error)

    def set_error(self, message: str | None) -> None:
        """Set or clear the error message. Always clears loading."""
        with self.locked():
            self._status = UIStatus(loading=False, error=message)
        if message:
            logger.info(f"UI error set: {sanitize_string_for_logging(message)}")

    # ==================== USER ====================

    def update_user(self, fields: dict | None = None, **kwargs) -> User:
        """
        Shallow-merge ``fields`` (and kwargs) into the user record.

        Each field is validated on its own; a value the User model rejects
        is skipped and the rest of the patch still applies.
        """
        patch = {**(fields or {}), **kwargs}
        with self.locked():
            user = self._user
            for name, value in patch.items():
                if name not in User.model_fields:
                    continue
                try:
                    user = user.merged({name: value})
                except ValidationError:
                    logger.warning(f"Ignoring invalid profile value for {sanitize_string_for_logging(name, 20)}")
            self._user = user
            return user

    def set_language(self, tag: str) -> str:
        """
        Set the user's language preference.

        Unsupported tags are stored normalized; lookups for them use the
        default table.
        """
        with self.locked():
            self._user = self._user.merged({"language": tag})
            language = self._user.language
        logger.debug(f"Language set to {sanitize_string_for_logging(language, 10)}")
        return language

    def t(self, key: str, **kwargs) -> str:
        """Translate ``key`` using the user's current language."""
        return get_text(key, detect_language(self.user.language), **kwargs)

    # ==================== ORDERS ====================

    def add_order(self, order: "Order") -> None:
        with self.locked():
            self._orders[order.id] = order

    def get_order(self, order_id: str) -> Optional["Order"]:
        with self.locked():
            return self._orders.get(order_id)

    @property
    def orders(self) -> list["Order"]:
        with self.locked():
            return list(self._orders.values())


# ==================== SCOPE ====================

_current_store: ContextVar[Optional[Store]] = ContextVar("freshbox_store", default=None)


def get_store() -> Store:
    """
    Get the store of the enclosing scope.

    Raises:
        StoreScopeError: No scope is active, or its store is closed
    """
    store = _current_store.get()
    if store is None:
        logger.error(ERROR_STORE_NOT_CONFIGURED)
        raise StoreScopeError(ERROR_STORE_NOT_CONFIGURED)
    store._ensure_open()
    return store


@contextmanager
def store_scope(store: Store | None = None, settings: Settings | None = None) -> Iterator[Store]:
    """
    Make ``store`` (or a new one) the current store for the block.

    The store is closed when the block exits.
    """
    if store is None:
        store = Store(settings=settings)
    token = _current_store.set(store)
    try:
        yield store
    finally:
        _current_store.reset(token)
        store.close()
