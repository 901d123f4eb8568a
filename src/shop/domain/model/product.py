"""Product aggregate.

Products live independently of carts and orders. They have their own
lifecycle: names and prices change, stock goes up and down. The Cart
and Order layer only consults a product's stock before committing a
quantity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from shop.domain.exceptions import InsufficientStockError, ValidationError
from shop.domain.model.clock import Clock, system_clock
from shop.domain.model.value_objects import Money, ProductId, Quantity

MIN_NAME_LENGTH = 2


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root — it is the entry point for any
    operation involving a product. Kept as a mutable dataclass because
    name, price and stock updates are legitimate mutations on the
    aggregate. Every mutation refreshes ``updated_at``.
    """

    id: ProductId
    name: str
    description: str
    price: Money
    stock: int
    created_at: datetime
    updated_at: datetime
    clock: Clock = field(default=system_clock, repr=False, compare=False)

    @staticmethod
    def create(
        name: str,
        description: str,
        price: str | int | float | Money,
        stock: int = 0,
        clock: Clock = system_clock,
    ) -> Product:
        name = validate_name(name)
        description = validate_description(description)
        price = Money.price(price)
        validate_stock(stock)

        now = clock()
        return Product(
            id=ProductId.new(),
            name=name,
            description=description,
            price=price,
            stock=stock,
            created_at=now,
            updated_at=now,
            clock=clock,
        )

    def change_name(self, name: str) -> None:
        self.name = validate_name(name)
        self._touch()

    def change_description(self, description: str) -> None:
        self.description = validate_description(description)
        self._touch()

    def update_price(self, new_price: str | int | float | Money) -> None:
        """Change the product price.

        This does NOT affect any existing orders because order lines
        capture a price snapshot when they are added.
        """
        self.price = Money.price(new_price, self.price.currency)
        self._touch()

    def change_stock(self, stock: int) -> None:
        validate_stock(stock)
        self.stock = stock
        self._touch()

    def increase_stock(self, quantity: int) -> None:
        self.stock += Quantity(quantity).value
        self._touch()

    def decrease_stock(self, quantity: int) -> None:
        qty = Quantity(quantity).value
        if qty > self.stock:
            raise InsufficientStockError(
                f"Insufficient stock for {self.name} "
                f"(need {qty}, have {self.stock})"
            )
        self.stock -= qty
        self._touch()

    @property
    def is_in_stock(self) -> bool:
        return self.stock > 0

    def has_sufficient_stock(self, quantity: int) -> bool:
        return self.stock >= quantity

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on name or description."""
        needle = query.strip().lower()
        return needle in self.name.lower() or needle in self.description.lower()

    def _touch(self) -> None:
        self.updated_at = max(self.clock(), self.updated_at)


def validate_name(name: str) -> str:
    name = name.strip() if isinstance(name, str) else ""
    if len(name) < MIN_NAME_LENGTH:
        raise ValidationError(
            f"Product name must be at least {MIN_NAME_LENGTH} characters"
        )
    return name


def validate_description(description: str) -> str:
    description = description.strip() if isinstance(description, str) else ""
    if not description:
        raise ValidationError("Product description is required")
    return description


def validate_stock(stock: int) -> None:
    if not isinstance(stock, int) or isinstance(stock, bool) or stock < 0:
        raise ValidationError(f"Stock must be a non-negative integer, got {stock!r}")
