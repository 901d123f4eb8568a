"""Application service: Show Order use case (query)."""

from __future__ import annotations

from shop.application.dto import OrderDTO, order_to_dto
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")
        return order_to_dto(order)
