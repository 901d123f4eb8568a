"""Cart aggregate — one user's pending selection of products.

The Cart owns its line items and keeps at most one line per product.
Adding a product that is already present merges into the existing line;
setting a quantity replaces it. The two must not be confused: "add to
cart" is incremental, "update quantity" is an explicit correction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from shop.domain.exceptions import ItemNotFoundError
from shop.domain.model.clock import Clock, system_clock
from shop.domain.model.value_objects import (
    CartId,
    LineItemId,
    ProductId,
    Quantity,
    UserId,
)


@dataclass
class CartItem:
    """A product and how many of it the user wants.

    ``id``, ``product_id`` and ``created_at`` never change after creation.
    """

    id: LineItemId
    product_id: ProductId
    quantity: Quantity
    created_at: datetime
    updated_at: datetime

    def increase_quantity(self, amount: Quantity, now: datetime) -> None:
        self.quantity = self.quantity + amount
        self.updated_at = now

    def update_quantity(self, quantity: Quantity, now: datetime) -> None:
        self.quantity = quantity
        self.updated_at = now


@dataclass
class Cart:
    """Aggregate root for shopping carts.

    Use ``Cart.create()`` for new carts. The ``__init__`` is kept simple so
    repositories can reconstitute persisted carts as they were stored.

    Invariants:
    - no two items share a ``product_id``
    - every item has a positive quantity; an item is removed, never zeroed
    """

    id: CartId
    user_id: UserId
    items: list[CartItem]
    created_at: datetime
    updated_at: datetime
    clock: Clock = field(default=system_clock, repr=False, compare=False)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(user_id: str, clock: Clock = system_clock) -> Cart:
        """Create an empty cart for *user_id*."""
        owner = UserId(user_id)
        now = clock()
        return Cart(
            id=CartId.new(),
            user_id=owner,
            items=[],
            created_at=now,
            updated_at=now,
            clock=clock,
        )

    # --- Mutations ------------------------------------------------------------

    def add_item(self, product_id: str, quantity: int) -> CartItem:
        """Add *quantity* of a product, merging into an existing line."""
        qty = Quantity(quantity)
        pid = ProductId(product_id)

        now = self._touch()
        existing = self._find_item(pid)
        if existing is not None:
            existing.increase_quantity(qty, now)
            return existing

        item = CartItem(
            id=LineItemId.new(),
            product_id=pid,
            quantity=qty,
            created_at=now,
            updated_at=now,
        )
        self.items.append(item)
        return item

    def remove_item(self, product_id: str) -> None:
        item = self.get_item(product_id)
        self.items.remove(item)
        self._touch()

    def update_item_quantity(self, product_id: str, quantity: int) -> CartItem:
        """Set a line's quantity to exactly *quantity*."""
        qty = Quantity(quantity)
        item = self.get_item(product_id)
        item.update_quantity(qty, self._touch())
        return item

    def clear(self) -> None:
        self.items = []
        self._touch()

    # --- Queries --------------------------------------------------------------

    @property
    def item_count(self) -> int:
        """Number of distinct lines."""
        return len(self.items)

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity.value for item in self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def has_item(self, product_id: str) -> bool:
        return any(item.product_id.value == product_id for item in self.items)

    def get_item(self, product_id: str) -> CartItem:
        for item in self.items:
            if item.product_id.value == product_id:
                return item
        raise ItemNotFoundError(f"Product '{product_id}' not found in cart")

    # --- Internal helpers -----------------------------------------------------

    def _find_item(self, product_id: ProductId) -> CartItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def _touch(self) -> datetime:
        # updated_at never moves backwards, even if the clock does
        now = max(self.clock(), self.updated_at)
        self.updated_at = now
        return now
