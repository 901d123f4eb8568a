"""Abstract repository for Cart aggregate.

One active cart per user is enforced here, through ``get_by_user_id``,
not by the aggregate itself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_by_id(self, cart_id: str) -> Cart | None:
        """Return a cart by its ID, or None if not found."""

    @abstractmethod
    def get_by_user_id(self, user_id: str) -> Cart | None:
        """Return the user's active cart, or None."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist a new or updated cart."""

    @abstractmethod
    def delete(self, cart_id: str) -> None:
        """Remove a cart. Deleting an unknown cart is a no-op."""
