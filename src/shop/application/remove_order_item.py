"""Application service: Remove Order Item use case.

Only pending orders accept this; the aggregate refuses otherwise. The
removed units are not returned to stock.
"""

from __future__ import annotations

import structlog

from shop.application.dto import OrderDTO, order_to_dto
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class RemoveOrderItemHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, line_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")

        order.remove_item(line_id)
        self._order_repo.save(order)

        logger.info(
            "Removed order line",
            order_id=order_id,
            line_id=line_id,
            total_amount=str(order.total_amount.amount),
        )
        return order_to_dto(order)
