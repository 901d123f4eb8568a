"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from shop.application.dto import ProductDTO, product_to_dto
from shop.domain.exceptions import ValidationError
from shop.domain.model.clock import Clock, system_clock
from shop.domain.model.product import Product
from shop.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository, clock: Clock = system_clock) -> None:
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, name: str, description: str, price: str, stock: int = 0) -> ProductDTO:
        """Add a new product to the catalog. Names are unique."""
        product = Product.create(
            name=name, description=description, price=price, stock=stock, clock=self._clock
        )

        if self._product_repo.get_by_name(product.name) is not None:
            raise ValidationError(f"Product '{product.name}' already exists")

        self._product_repo.save(product)
        logger.info("Added product", product_id=product.id.value, name=product.name)
        return product_to_dto(product)
