"""Unit tests for the StockCheckService domain service."""

import pytest

from shop.domain.exceptions import EntityNotFoundError, InsufficientStockError
from shop.domain.model.cart import Cart
from shop.domain.service.stock_check_service import StockCheckService
from tests.fakes import FakeProductRepository, StepClock, make_product


def _setup(*products):
    repo = FakeProductRepository(list(products))
    return StockCheckService(repo), repo


def _cart(*lines: tuple[str, int]) -> Cart:
    cart = Cart.create("user-1", clock=StepClock())
    for pid, qty in lines:
        cart.add_item(pid, qty)
    return cart


class TestEnsureAvailable:

    def test_returns_product(self):
        svc, _ = _setup(make_product("P1", stock=5))
        assert svc.ensure_available("P1", 5).id.value == "P1"

    def test_unknown_product(self):
        svc, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="P1"):
            svc.ensure_available("P1", 1)

    def test_short_stock(self):
        svc, _ = _setup(make_product("P1", name="Widget", stock=2))
        with pytest.raises(InsufficientStockError, match="Insufficient stock for Widget"):
            svc.ensure_available("P1", 3)


class TestCheckoutPhases:

    def test_check_cart_pairs_products_with_quantities(self):
        svc, _ = _setup(make_product("P1"), make_product("P2", name="Gadget"))
        pairs = svc.check_cart(_cart(("P1", 2), ("P2", 1)))
        assert [(p.id.value, qty) for p, qty in pairs] == [("P1", 2), ("P2", 1)]

    def test_check_fails_without_touching_stock(self):
        svc, repo = _setup(
            make_product("P1", stock=10),
            make_product("P2", name="Gadget", stock=1),
        )
        with pytest.raises(InsufficientStockError):
            svc.check_cart(_cart(("P1", 5), ("P2", 2)))
        assert repo.get_by_id("P1").stock == 10
        assert repo.get_by_id("P2").stock == 1

    def test_deduct(self):
        svc, repo = _setup(make_product("P1", stock=10), make_product("P2", name="Gadget", stock=3))
        svc.deduct(svc.check_cart(_cart(("P1", 4), ("P2", 3))))
        assert repo.get_by_id("P1").stock == 6
        assert repo.get_by_id("P2").stock == 0
