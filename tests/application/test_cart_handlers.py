"""Integration tests for the cart use cases.

Uses in-memory fake repositories — no file I/O.
"""

import pytest

from shop.application.add_to_cart import AddToCartHandler
from shop.application.clear_cart import ClearCartHandler
from shop.application.delete_cart import DeleteCartHandler
from shop.application.remove_from_cart import RemoveFromCartHandler
from shop.application.show_cart import ShowCartHandler
from shop.application.update_cart_item import UpdateCartItemHandler
from shop.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    InvalidProductIdError,
    InvalidQuantityError,
    ItemNotFoundError,
)
from tests.fakes import FakeCartRepository, FakeProductRepository, StepClock, make_product


def _setup():
    cart_repo = FakeCartRepository()
    product_repo = FakeProductRepository([
        make_product("P1", "Widget", "9.99", stock=10),
        make_product("P2", "Gadget", "25.00", stock=2),
    ])
    add = AddToCartHandler(cart_repo, product_repo, clock=StepClock())
    return add, cart_repo, product_repo


class TestAddToCart:

    def test_creates_cart_on_first_add(self):
        add, cart_repo, _ = _setup()
        dto = add.handle("alice", "P1", 2)
        assert dto.user_id == "alice"
        assert dto.items[0].product_id == "P1"
        assert dto.items[0].quantity == 2
        assert cart_repo.get_by_user_id("alice") is not None

    def test_reuses_existing_cart(self):
        add, _, _ = _setup()
        first = add.handle("alice", "P1", 1)
        second = add.handle("alice", "P2", 1)
        assert first.id == second.id
        assert second.item_count == 2

    def test_repeat_add_merges(self):
        add, _, _ = _setup()
        add.handle("alice", "P1", 3)
        dto = add.handle("alice", "P1", 4)
        assert dto.item_count == 1
        assert dto.total_quantity == 7

    def test_merged_quantity_checked_against_stock(self):
        add, cart_repo, _ = _setup()
        add.handle("alice", "P2", 2)
        with pytest.raises(InsufficientStockError):
            add.handle("alice", "P2", 1)
        assert cart_repo.get_by_user_id("alice").get_item("P2").quantity.value == 2

    def test_unknown_product_rejected(self):
        add, cart_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="P9"):
            add.handle("alice", "P9", 1)
        assert cart_repo.get_by_user_id("alice") is None

    def test_invalid_quantity_rejected(self):
        add, _, _ = _setup()
        with pytest.raises(InvalidQuantityError):
            add.handle("alice", "P1", 0)

    def test_blank_product_rejected(self):
        add, _, _ = _setup()
        with pytest.raises(InvalidProductIdError):
            add.handle("alice", "", 1)

    def test_carts_are_per_user(self):
        add, _, _ = _setup()
        a = add.handle("alice", "P1", 1)
        b = add.handle("bob", "P1", 1)
        assert a.id != b.id


class TestUpdateCartItem:

    def test_replaces_quantity(self):
        add, cart_repo, product_repo = _setup()
        add.handle("alice", "P1", 3)
        dto = UpdateCartItemHandler(cart_repo, product_repo).handle("alice", "P1", 1)
        assert dto.items[0].quantity == 1

    def test_new_quantity_checked_against_stock(self):
        add, cart_repo, product_repo = _setup()
        add.handle("alice", "P2", 1)
        with pytest.raises(InsufficientStockError):
            UpdateCartItemHandler(cart_repo, product_repo).handle("alice", "P2", 3)

    def test_product_not_in_cart(self):
        add, cart_repo, product_repo = _setup()
        add.handle("alice", "P1", 1)
        with pytest.raises(ItemNotFoundError):
            UpdateCartItemHandler(cart_repo, product_repo).handle("alice", "P2", 1)

    def test_no_cart(self):
        _, cart_repo, product_repo = _setup()
        with pytest.raises(EntityNotFoundError, match="No cart"):
            UpdateCartItemHandler(cart_repo, product_repo).handle("alice", "P1", 1)


class TestRemoveClearDelete:

    def test_remove(self):
        add, cart_repo, _ = _setup()
        add.handle("alice", "P1", 1)
        add.handle("alice", "P2", 1)
        dto = RemoveFromCartHandler(cart_repo).handle("alice", "P1")
        assert [i.product_id for i in dto.items] == ["P2"]

    def test_remove_missing(self):
        add, cart_repo, _ = _setup()
        add.handle("alice", "P1", 1)
        with pytest.raises(ItemNotFoundError):
            RemoveFromCartHandler(cart_repo).handle("alice", "P2")

    def test_clear_keeps_cart(self):
        add, cart_repo, _ = _setup()
        first = add.handle("alice", "P1", 1)
        dto = ClearCartHandler(cart_repo).handle("alice")
        assert dto.id == first.id
        assert dto.items == []

    def test_delete(self):
        add, cart_repo, _ = _setup()
        add.handle("alice", "P1", 1)
        DeleteCartHandler(cart_repo).handle("alice")
        assert cart_repo.get_by_user_id("alice") is None

    def test_show(self):
        add, cart_repo, _ = _setup()
        add.handle("alice", "P1", 2)
        dto = ShowCartHandler(cart_repo).handle("alice")
        assert dto.total_quantity == 2

    def test_show_missing(self):
        _, cart_repo, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            ShowCartHandler(cart_repo).handle("alice")
