"""Application service: Delete Cart use case."""

from __future__ import annotations

import structlog

from shop.domain.exceptions import EntityNotFoundError
from shop.domain.repository.cart_repository import CartRepository

logger = structlog.get_logger(__name__)


class DeleteCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, user_id: str) -> None:
        cart = self._cart_repo.get_by_user_id(user_id)
        if cart is None:
            raise EntityNotFoundError(f"No cart found for user '{user_id}'")

        self._cart_repo.delete(cart.id.value)
        logger.info("Deleted cart", cart_id=cart.id.value, user_id=user_id)
