"""Application service: Clear Cart use case.

Empties the cart but keeps it; the user's next "add" reuses it.
"""

from __future__ import annotations

import structlog

from shop.application.dto import CartDTO, cart_to_dto
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.repository.cart_repository import CartRepository

logger = structlog.get_logger(__name__)


class ClearCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, user_id: str) -> CartDTO:
        cart = self._cart_repo.get_by_user_id(user_id)
        if cart is None:
            raise EntityNotFoundError(f"No cart found for user '{user_id}'")

        dropped = cart.item_count
        cart.clear()
        self._cart_repo.save(cart)

        logger.info("Cleared cart", cart_id=cart.id.value, dropped_items=dropped)
        return cart_to_dto(cart)
