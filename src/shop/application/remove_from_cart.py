"""Application service: Remove From Cart use case."""

from __future__ import annotations

import structlog

from shop.application.dto import CartDTO, cart_to_dto
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.repository.cart_repository import CartRepository

logger = structlog.get_logger(__name__)


class RemoveFromCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, user_id: str, product_id: str) -> CartDTO:
        cart = self._cart_repo.get_by_user_id(user_id)
        if cart is None:
            raise EntityNotFoundError(f"No cart found for user '{user_id}'")

        cart.remove_item(product_id)
        self._cart_repo.save(cart)

        logger.info("Removed item from cart", cart_id=cart.id.value, product_id=product_id)
        return cart_to_dto(cart)
