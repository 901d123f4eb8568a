"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from shop.application.dto import CartDTO, cart_to_dto
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.repository.cart_repository import CartRepository


class ShowCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, user_id: str) -> CartDTO:
        cart = self._cart_repo.get_by_user_id(user_id)
        if cart is None:
            raise EntityNotFoundError(f"No cart found for user '{user_id}'")
        return cart_to_dto(cart)
