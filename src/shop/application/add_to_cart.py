"""Application service: Add To Cart use case.

Gets or creates the user's cart, checks the catalog can supply the
merged quantity, then lets the Cart aggregate merge the line.
"""

from __future__ import annotations

import structlog

from shop.application.dto import CartDTO, cart_to_dto
from shop.domain.model.cart import Cart
from shop.domain.model.clock import Clock, system_clock
from shop.domain.model.value_objects import ProductId, Quantity
from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.domain.service.stock_check_service import StockCheckService

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        clock: Clock = system_clock,
    ) -> None:
        self._cart_repo = cart_repo
        self._stock = StockCheckService(product_repo)
        self._clock = clock

    def handle(self, user_id: str, product_id: str, quantity: int) -> CartDTO:
        """Add *quantity* units of a product to the user's cart.

        Steps:
        1. Validate the raw quantity and product id.
        2. Load the user's cart, creating an empty one on first use.
        3. Check stock for the quantity the line will hold after merging.
        4. Merge-add on the aggregate, persist and return a DTO.
        """
        qty = Quantity(quantity)
        pid = ProductId(product_id)

        cart = self._cart_repo.get_by_user_id(user_id)
        created = cart is None
        if cart is None:
            cart = Cart.create(user_id, clock=self._clock)

        already = cart.get_item(pid.value).quantity.value if cart.has_item(pid.value) else 0
        self._stock.ensure_available(pid.value, already + qty.value)

        item = cart.add_item(pid.value, qty.value)
        self._cart_repo.save(cart)

        if created:
            logger.info("Created cart", cart_id=cart.id.value, user_id=user_id)
        logger.info(
            "Added item to cart",
            cart_id=cart.id.value,
            user_id=user_id,
            product_id=pid.value,
            added=qty.value,
            quantity=item.quantity.value,
        )
        return cart_to_dto(cart)
