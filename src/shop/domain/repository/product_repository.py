"""Abstract repository for Product aggregate.

The product catalog is the stock authority the Cart and Order layer
consults. Like the other repositories it is declared here, in the
domain layer, and implemented in infrastructure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return the whole catalog."""

    @abstractmethod
    def search(self, query: str, limit: int = 50, offset: int = 0) -> list[Product]:
        """Return products whose name or description contains *query*.

        Matching is case-insensitive. Results keep catalog order and are
        paged with *limit* and *offset*.
        """

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product. Unknown IDs are ignored."""
