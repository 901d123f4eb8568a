"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import ClassVar

from shop.domain.exceptions import (
    InvalidIdentifierError,
    InvalidPriceError,
    InvalidProductIdError,
    InvalidQuantityError,
    InvalidUserIdError,
    ValidationError,
)


# --- Identifiers --------------------------------------------------------------


@dataclass(frozen=True)
class Identifier:
    """Opaque, non-blank string identifier.

    Subclasses pick the exception raised on a bad value so callers can
    tell a malformed user id from a malformed product id.
    """

    value: str

    error: ClassVar[type[ValidationError]] = InvalidIdentifierError

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise self.error(f"{type(self).__name__} cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def new(cls) -> Identifier:
        return cls(str(uuid.uuid4()))


@dataclass(frozen=True)
class UserId(Identifier):
    error: ClassVar[type[ValidationError]] = InvalidUserIdError


@dataclass(frozen=True)
class ProductId(Identifier):
    error: ClassVar[type[ValidationError]] = InvalidProductIdError


@dataclass(frozen=True)
class CartId(Identifier):
    pass


@dataclass(frozen=True)
class OrderId(Identifier):
    pass


@dataclass(frozen=True)
class LineItemId(Identifier):
    pass


# --- Money --------------------------------------------------------------------


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations. Totals may be zero; prices
    must be built with ``Money.price()`` which also rejects zero.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    @property
    def is_positive(self) -> bool:
        return self.amount > Decimal("0")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0.00"), currency)

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = "USD") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc

    @staticmethod
    def price(
        amount: str | float | int | Decimal | Money,
        currency: str = "USD",
    ) -> Money:
        """Build a unit price: a positive, finite amount in *currency*.

        A ``Money`` in any other currency is rejected rather than
        converted.
        """
        if isinstance(amount, Money):
            if amount.currency != currency:
                raise InvalidPriceError(
                    f"Price must be in {currency}, got {amount.currency}"
                )
            money = amount
        else:
            try:
                money = Money.of(amount, currency)
            except ValidationError as exc:
                raise InvalidPriceError(f"Invalid price: {amount!r}") from exc
        if not money.is_positive:
            raise InvalidPriceError(f"Price must be greater than zero, got {money}")
        return money


# --- Quantity -----------------------------------------------------------------


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot hold zero or negative items,
    whether in a cart line, an order line or a stock adjustment.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise InvalidQuantityError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise InvalidQuantityError("Quantity must be positive")

    def __add__(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def __str__(self) -> str:
        return str(self.value)
