"""Application service: Change Order Status use case.

The Order accepts any recognized status from any current status; this
handler does not add a transition table of its own.
"""

from __future__ import annotations

import structlog

from shop.application.dto import OrderDTO, order_to_dto
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class ChangeOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, new_status: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")

        previous = order.status
        order.change_status(new_status)
        self._order_repo.save(order)

        logger.info(
            "Changed order status",
            order_id=order_id,
            previous_status=previous.value,
            status=order.status.value,
        )
        return order_to_dto(order)
