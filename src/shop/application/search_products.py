"""Application service: Search Products use case (query)."""

from __future__ import annotations

from shop.application.dto import ProductDTO, product_to_dto
from shop.domain.exceptions import ValidationError
from shop.domain.repository.product_repository import ProductRepository

DEFAULT_PAGE_SIZE = 50


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        query: str,
        limit: int = DEFAULT_PAGE_SIZE,
        offset: int = 0,
    ) -> list[ProductDTO]:
        """Find products whose name or description contains *query*."""
        if not query or not query.strip():
            raise ValidationError("Search query cannot be empty")
        if limit <= 0 or offset < 0:
            raise ValidationError("limit must be positive and offset non-negative")

        products = self._product_repo.search(query, limit, offset)
        return [product_to_dto(product) for product in products]
