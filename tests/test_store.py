"""
Tests for the storefront state store
"""

import threading
from decimal import Decimal

import pytest
from pydantic import ValidationError

from freshbox.errors import StoreScopeError
from freshbox.store import DEFAULT_USER, Store, get_store, store_scope


class TestCartOperations:
    """Cart operations and derived totals."""

    def test_repeated_add_gives_single_line(self, store, berry_mix):
        """N adds of the same product -> one line with quantity N."""
        for _ in range(4):
            store.add_to_cart(berry_mix)

        assert len(store.cart) == 1
        assert store.cart[0].quantity == 4
        assert store.item_count == 4

    def test_remove_is_idempotent(self, store, berry_mix, green_pack):
        store.add_to_cart(berry_mix)
        store.add_to_cart(green_pack)

        store.remove_from_cart("1")
        after_first = [(line.product_id, line.quantity) for line in store.cart]
        store.remove_from_cart("1")
        after_second = [(line.product_id, line.quantity) for line in store.cart]

        assert after_first == after_second == [("3", 1)]

    def test_update_quantity_zero_removes(self, store, berry_mix):
        store.add_to_cart(berry_mix)

        store.update_quantity("1", 0)

        assert store.cart == []

    def test_update_quantity_unknown_id_is_noop(self, store, berry_mix):
        store.add_to_cart(berry_mix)

        store.update_quantity("404", 3)

        assert [(line.product_id, line.quantity) for line in store.cart] == [("1", 1)]

    def test_clear_cart_zeroes_totals(self, store, berry_mix, green_pack):
        store.add_to_cart(berry_mix)
        store.add_to_cart(green_pack)

        store.clear_cart()

        assert store.subtotal == Decimal("0")
        assert store.item_count == 0

    def test_add_does_not_check_stock(self, store, soup_pack):
        """Stock gating belongs to the caller."""
        store.add_to_cart(soup_pack)

        assert store.item_count == 1

    def test_checkout_scenario(self, store, berry_mix, green_pack):
        """A (14.90) + B (9.99), then A -> 3: subtotal 54.69, free delivery."""
        store.add_to_cart(berry_mix)
        store.add_to_cart(green_pack)
        store.update_quantity(berry_mix.id, 3)

        totals = store.totals()
        assert len(store.cart) == 2
        assert totals.item_count == 4
        assert totals.subtotal == Decimal("54.69")
        assert totals.delivery_fee == Decimal("0")
        assert totals.final_total == Decimal("54.69")

    def test_totals_follow_every_change(self, store, green_pack):
        store.add_to_cart(green_pack)
        assert store.delivery_fee == Decimal("4.99")
        assert store.final_total == Decimal("14.98")

        store.update_quantity(green_pack.id, 6)
        assert store.subtotal == Decimal("59.94")
        assert store.delivery_fee == Decimal("0")
        assert store.final_total == store.subtotal + store.delivery_fee

    def test_cart_returns_copies(self, store, berry_mix):
        store.add_to_cart(berry_mix)

        store.cart[0].quantity = 99

        assert store.item_count == 1


class TestStatusAndUser:
    """UI status flags and user profile."""

    def test_initial_state(self, store):
        assert store.status.loading is False
        assert store.status.error is None
        assert store.user.name == DEFAULT_USER.name
        assert len(store.products) == 6
        assert len(store.categories) == 6

    def test_set_error_clears_loading(self, store):
        store.set_loading(True)
        assert store.status.loading is True

        store.set_error("Network unavailable")

        assert store.status.loading is False
        assert store.status.error == "Network unavailable"

    def test_set_loading_keeps_error(self, store):
        store.set_error("boom")
        store.set_loading(True)

        assert store.status.error == "boom"

        store.set_error(None)
        assert store.status.error is None
        assert store.status.loading is False

    def test_update_user_merges(self, store):
        user = store.update_user({"name": "Sam Lee"}, addresses=3)

        assert user.name == "Sam Lee"
        assert user.addresses == 3
        assert user.email == DEFAULT_USER.email
        assert store.user == user

    def test_update_user_ignores_unknown_fields(self, store):
        user = store.update_user({"nickname": "sam"})

        assert not hasattr(user, "nickname")
        assert user == DEFAULT_USER

    def test_update_user_skips_invalid_values(self, store):
        """Rejected values are dropped, valid fields in the same patch apply."""
        user = store.update_user(orders=-1, name=None, addresses=4)

        assert user.orders == DEFAULT_USER.orders
        assert user.name == DEFAULT_USER.name
        assert user.addresses == 4

    def test_user_cannot_be_changed_in_place(self, store):
        """Only update_user changes the profile."""
        snapshot = store.snapshot()

        with pytest.raises(ValidationError):
            store.user.name = "Someone Else"
        with pytest.raises(ValidationError):
            snapshot.user.orders = -7

        assert store.user.name == DEFAULT_USER.name
        assert store.user.orders == DEFAULT_USER.orders

    def test_snapshot_keeps_user_after_update(self, store):
        snapshot = store.snapshot()

        store.update_user(name="Sam Lee")

        assert snapshot.user.name == DEFAULT_USER.name
        assert store.user.name == "Sam Lee"

    def test_set_language_switches_translations(self, store):
        assert store.t("cart.title") == "My Cart"

        store.set_language("hi-IN")

        assert store.user.language == "hi"
        assert store.t("cart.title") == "मेरी कार्ट"

    def test_unsupported_language_uses_default_table(self, store):
        store.set_language("fr")

        assert store.t("cart.title") == "My Cart"
        assert store.t("no.such.key") == "no.such.key"

    def test_snapshot(self, store, berry_mix):
        store.add_to_cart(berry_mix)

        data = store.snapshot().to_dict()

        assert data["cart"][0]["id"] == "1"
        assert data["totals"]["item_count"] == 1
        assert data["status"] == {"loading": False, "error": None}
        assert data["user"]["name"] == DEFAULT_USER.name


class TestConcurrency:
    """Operations from several threads apply whole."""

    def test_parallel_adds_are_not_lost(self, store, berry_mix):
        threads_count, adds_per_thread = 8, 250
        start = threading.Barrier(threads_count)

        def worker():
            start.wait()
            for _ in range(adds_per_thread):
                store.add_to_cart(berry_mix)

        threads = [threading.Thread(target=worker) for _ in range(threads_count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(store.cart) == 1
        assert store.cart[0].quantity == threads_count * adds_per_thread
        assert store.item_count == threads_count * adds_per_thread

    def test_parallel_add_and_remove_keep_one_line_per_product(self, store, berry_mix, green_pack):
        def adder():
            for _ in range(200):
                store.add_to_cart(berry_mix)
                store.add_to_cart(green_pack)

        def remover():
            for _ in range(200):
                store.remove_from_cart(green_pack.id)

        threads = [threading.Thread(target=adder), threading.Thread(target=remover)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        ids = [line.product_id for line in store.cart]
        assert len(ids) == len(set(ids))
        assert store.cart[0].product_id == berry_mix.id
        assert store.cart[0].quantity == 200


class TestStoreScope:
    """Scope ownership and configuration errors."""

    def test_get_store_outside_scope_fails(self):
        with pytest.raises(StoreScopeError):
            get_store()

    def test_get_store_inside_scope(self, settings, berry_mix):
        with store_scope(settings=settings) as store:
            assert get_store() is store
            get_store().add_to_cart(berry_mix)
            assert store.item_count == 1

    def test_store_unusable_after_scope(self, settings, berry_mix):
        with store_scope(settings=settings) as store:
            pass

        assert store.closed
        with pytest.raises(StoreScopeError):
            get_store()
        with pytest.raises(StoreScopeError):
            store.add_to_cart(berry_mix)
        with pytest.raises(StoreScopeError):
            store.totals()

    def test_nested_scope_restores_outer(self, settings):
        outer_store = Store(settings=settings)
        with store_scope(outer_store):
            with store_scope(settings=settings) as inner:
                assert get_store() is inner
            assert get_store() is outer_store


def test_package_exports_store_api():
    import freshbox

    assert freshbox.Store is Store
    assert freshbox.get_store is get_store
    assert freshbox.store_scope is store_scope
