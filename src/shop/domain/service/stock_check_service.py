"""Domain service: Stock Check.

Consults the product catalog before a quantity is committed to a cart
or turned into an order. It lives in the domain layer because "you
cannot order what is not in stock" is a business rule, not plumbing.

Checkout uses the two-phase approach (validate-then-mutate) so stock is
never left partially deducted when one product in the cart is short.
"""

from __future__ import annotations

from shop.domain.exceptions import EntityNotFoundError, InsufficientStockError
from shop.domain.model.cart import Cart
from shop.domain.model.product import Product
from shop.domain.repository.product_repository import ProductRepository


class StockCheckService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def ensure_available(self, product_id: str, quantity: int) -> Product:
        """Return the product if it can supply *quantity* units."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if not product.has_sufficient_stock(quantity):
            raise InsufficientStockError(
                f"Insufficient stock for {product.name} "
                f"(need {quantity}, have {product.stock})"
            )
        return product

    def check_cart(self, cart: Cart) -> list[tuple[Product, int]]:
        """Phase 1 — load and validate every line of *cart*.

        Fails fast before anything is mutated. The returned pairs are fed
        to ``deduct()`` once the caller is ready to commit.
        """
        return [
            (self.ensure_available(item.product_id.value, item.quantity.value), item.quantity.value)
            for item in cart.items
        ]

    def deduct(self, reservations: list[tuple[Product, int]]) -> None:
        """Phase 2 — mutate and persist."""
        for product, qty in reservations:
            product.decrease_stock(qty)
            self._product_repo.save(product)
