"""Application service: Update Product use case."""

from __future__ import annotations

import structlog

from shop.application.dto import ProductDTO, product_to_dto
from shop.domain.exceptions import EntityNotFoundError, ValidationError
from shop.domain.model.product import validate_description, validate_name, validate_stock
from shop.domain.model.value_objects import Money
from shop.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        new_price: str | None = None,
        new_stock: int | None = None,
        new_name: str | None = None,
        new_description: str | None = None,
    ) -> ProductDTO:
        """Update any of a product's name, description, price and stock.

        Every given value is checked before any is applied. A price
        change does NOT affect existing orders — their lines captured a
        price snapshot when they were placed.
        """
        if all(v is None for v in (new_price, new_stock, new_name, new_description)):
            raise ValidationError("Nothing to update")

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if new_name is not None:
            name = validate_name(new_name)
            other = self._product_repo.get_by_name(name)
            if other is not None and other.id != product.id:
                raise ValidationError(f"Product '{name}' already exists")
        if new_description is not None:
            validate_description(new_description)
        if new_price is not None:
            Money.price(new_price, product.price.currency)
        if new_stock is not None:
            validate_stock(new_stock)

        changed: list[str] = []
        if new_name is not None:
            product.change_name(new_name)
            changed.append("name")
        if new_description is not None:
            product.change_description(new_description)
            changed.append("description")
        if new_price is not None:
            product.update_price(new_price)
            changed.append("price")
        if new_stock is not None:
            product.change_stock(new_stock)
            changed.append("stock")
        self._product_repo.save(product)

        logger.info("Updated product", product_id=product_id, fields=changed)
        return product_to_dto(product)
