"""Application service: Place Order (checkout) use case.

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates multiple aggregates: the
user's Cart is turned into a pending Order priced from the Product
catalog, stock is deducted, and the cart is deleted.
"""

from __future__ import annotations

import structlog

from shop.application.dto import OrderDTO, order_to_dto
from shop.domain.exceptions import EntityNotFoundError, ValidationError
from shop.domain.model.clock import Clock, system_clock
from shop.domain.model.order import Order
from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.domain.service.stock_check_service import StockCheckService

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        clock: Clock = system_clock,
    ) -> None:
        self._order_repo = order_repo
        self._cart_repo = cart_repo
        self._stock = StockCheckService(product_repo)
        self._clock = clock

    def handle(
        self,
        user_id: str,
        shipping_address: str,
        billing_address: str,
        payment_method: str,
    ) -> OrderDTO:
        """Check out the user's cart.

        Steps:
        1. Load the cart (fail if missing or empty).
        2. Let the Order aggregate validate addresses and payment method.
        3. Check every cart line against stock before touching anything.
        4. Copy each line into the order with the *current* price (snapshot).
        5. Deduct stock, persist the order, delete the cart.
        """
        cart = self._cart_repo.get_by_user_id(user_id)
        if cart is None:
            raise EntityNotFoundError(f"No cart found for user '{user_id}'")
        if cart.is_empty:
            raise ValidationError("Cannot check out an empty cart")

        order = Order.create(
            user_id=user_id,
            shipping_address=shipping_address,
            billing_address=billing_address,
            payment_method=payment_method,
            clock=self._clock,
        )

        reservations = self._stock.check_cart(cart)
        for product, qty in reservations:
            order.add_item(product.id.value, qty, product.price)  # <-- price snapshot

        self._stock.deduct(reservations)
        self._order_repo.save(order)
        self._cart_repo.delete(cart.id.value)

        logger.info(
            "Placed order",
            order_id=order.id.value,
            user_id=user_id,
            cart_id=cart.id.value,
            line_count=order.item_count,
            total_amount=str(order.total_amount.amount),
        )
        return order_to_dto(order)
