"""Application service: Update Order Details use case.

Changes any of shipping address, billing address and payment method.
Every given value is checked before any is applied, so a rejected value
leaves the order as it was.
"""

from __future__ import annotations

import structlog

from shop.application.dto import OrderDTO, order_to_dto
from shop.domain.exceptions import EntityNotFoundError, ValidationError
from shop.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class UpdateOrderDetailsHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        order_id: str,
        shipping_address: str | None = None,
        billing_address: str | None = None,
        payment_method: str | None = None,
    ) -> OrderDTO:
        if shipping_address is None and billing_address is None and payment_method is None:
            raise ValidationError("Nothing to update")

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order {order_id} not found")

        changed = order.change_details(
            shipping_address=shipping_address,
            billing_address=billing_address,
            payment_method=payment_method,
        )

        self._order_repo.save(order)
        logger.info("Updated order details", order_id=order_id, fields=changed)
        return order_to_dto(order)
