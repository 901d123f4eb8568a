"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_by_user_id(self, user_id: str, limit: int = 50, offset: int = 0) -> list[Order]:
        """Return a page of the user's orders, oldest first."""

    @abstractmethod
    def list_by_status(self, status: OrderStatus, limit: int = 50, offset: int = 0) -> list[Order]:
        """Return a page of orders currently in *status*."""

    @abstractmethod
    def list_all(self, limit: int = 50, offset: int = 0) -> list[Order]:
        """Return a page of every order."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order."""

    @abstractmethod
    def delete(self, order_id: str) -> None:
        """Remove an order. Deleting an unknown order is a no-op."""
