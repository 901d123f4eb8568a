"""Application service: Delete Order use case.

Administrative only. Orders are kept after they reach a terminal
status; nothing else in the system deletes them.
"""

from __future__ import annotations

import structlog

from shop.domain.exceptions import EntityNotFoundError
from shop.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")

        self._order_repo.delete(order_id)
        logger.warning("Deleted order", order_id=order_id, status=order.status.value)
