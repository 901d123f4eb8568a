"""Application service: List Orders use case (query).

Filters by user or by status; with neither, pages through everything.
"""

from __future__ import annotations

from shop.application.dto import OrderDTO, order_to_dto
from shop.domain.exceptions import ValidationError
from shop.domain.model.order import OrderStatus
from shop.domain.repository.order_repository import OrderRepository

DEFAULT_PAGE_SIZE = 50


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        user_id: str | None = None,
        status: str | None = None,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> list[OrderDTO]:
        if limit <= 0 or offset < 0:
            raise ValidationError("limit must be positive and offset non-negative")
        if user_id is not None and status is not None:
            raise ValidationError("Filter by user or by status, not both")

        if user_id is not None:
            orders = self._order_repo.list_by_user_id(user_id, limit, offset)
        elif status is not None:
            orders = self._order_repo.list_by_status(OrderStatus.parse(status), limit, offset)
        else:
            orders = self._order_repo.list_all(limit, offset)
        return [order_to_dto(order) for order in orders]
