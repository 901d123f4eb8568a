"""Application service: Update Cart Item use case.

Sets a cart line to an exact quantity (the "quantity stepper"), after
checking the catalog can supply it.
"""

from __future__ import annotations

import structlog

from shop.application.dto import CartDTO, cart_to_dto
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.value_objects import Quantity
from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.domain.service.stock_check_service import StockCheckService

logger = structlog.get_logger(__name__)


class UpdateCartItemHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._stock = StockCheckService(product_repo)

    def handle(self, user_id: str, product_id: str, quantity: int) -> CartDTO:
        cart = self._cart_repo.get_by_user_id(user_id)
        if cart is None:
            raise EntityNotFoundError(f"No cart found for user '{user_id}'")

        qty = Quantity(quantity)
        previous = cart.get_item(product_id).quantity.value
        self._stock.ensure_available(product_id, qty.value)

        cart.update_item_quantity(product_id, qty.value)
        self._cart_repo.save(cart)

        logger.info(
            "Updated cart item quantity",
            cart_id=cart.id.value,
            product_id=product_id,
            previous_quantity=previous,
            quantity=qty.value,
        )
        return cart_to_dto(cart)
