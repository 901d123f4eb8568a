"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items.
All business invariants are enforced here.

Lines are historical facts: each captures its unit price when it is
added, and two lines for the same product are kept apart rather than
merged (unlike the Cart).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from shop.domain.exceptions import (
    InvalidBillingAddressError,
    InvalidPaymentMethodError,
    InvalidShippingAddressError,
    InvalidStatusError,
    ItemNotFoundError,
    OrderNotModifiableError,
)
from shop.domain.model.clock import Clock, system_clock
from shop.domain.model.value_objects import (
    LineItemId,
    Money,
    OrderId,
    ProductId,
    Quantity,
    UserId,
)


class OrderStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value: str | OrderStatus) -> OrderStatus:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidStatusError(f"Invalid order status: {value!r}") from None


@dataclass
class OrderLineItem:
    """Captures the price snapshot of a product at the time it was ordered.

    Nothing on a line changes once it is created (price lock preserved).
    """

    id: LineItemId
    product_id: ProductId
    quantity: Quantity
    unit_price: Money  # locked when the line is added
    created_at: datetime
    updated_at: datetime

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules. The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating;
    ``total_amount`` is never taken from the caller and is rebuilt from
    the lines on construction.
    """

    id: OrderId
    user_id: UserId
    shipping_address: str
    billing_address: str
    payment_method: str
    items: list[OrderLineItem]
    created_at: datetime
    updated_at: datetime
    status: OrderStatus = OrderStatus.PENDING
    clock: Clock = field(default=system_clock, repr=False, compare=False)
    total_amount: Money = field(init=False)

    def __post_init__(self) -> None:
        self._recalculate_total()

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        user_id: str,
        shipping_address: str,
        billing_address: str,
        payment_method: str,
        clock: Clock = system_clock,
    ) -> Order:
        """Create a new pending order with no lines."""
        owner = UserId(user_id)
        shipping = _required(shipping_address, InvalidShippingAddressError, "Shipping address")
        billing = _required(billing_address, InvalidBillingAddressError, "Billing address")
        payment = _required(payment_method, InvalidPaymentMethodError, "Payment method")

        now = clock()
        return Order(
            id=OrderId.new(),
            user_id=owner,
            shipping_address=shipping,
            billing_address=billing,
            payment_method=payment,
            items=[],
            created_at=now,
            updated_at=now,
            clock=clock,
        )

    # --- Line items -----------------------------------------------------------

    def add_item(
        self,
        product_id: str,
        quantity: int,
        unit_price: str | float | int | Money,
    ) -> OrderLineItem:
        """Append a new line and recompute the total.

        Only allowed while the order is pending.
        """
        self._assert_modifiable()
        pid = ProductId(product_id)
        qty = Quantity(quantity)
        price = Money.price(unit_price, self.total_amount.currency)

        now = max(self.clock(), self.updated_at)
        item = OrderLineItem(
            id=LineItemId.new(),
            product_id=pid,
            quantity=qty,
            unit_price=price,
            created_at=now,
            updated_at=now,
        )
        total = _sum_lines([*self.items, item])

        self.items.append(item)
        self.total_amount = total
        self.updated_at = now
        return item

    def remove_item(self, line_id: str) -> None:
        self._assert_modifiable()
        item = self.get_item(line_id)
        self.items.remove(item)
        self._recalculate_total()
        self._touch()

    # --- Status ---------------------------------------------------------------

    def change_status(self, new_status: str | OrderStatus) -> None:
        """Move the order to *new_status*.

        Any recognized status is accepted from any current status.
        """
        self.status = OrderStatus.parse(new_status)
        self._touch()

    # --- Details --------------------------------------------------------------

    def change_shipping_address(self, address: str) -> None:
        self.shipping_address = _required(address, InvalidShippingAddressError, "Shipping address")
        self._touch()

    def change_billing_address(self, address: str) -> None:
        self.billing_address = _required(address, InvalidBillingAddressError, "Billing address")
        self._touch()

    def change_payment_method(self, method: str) -> None:
        self.payment_method = _required(method, InvalidPaymentMethodError, "Payment method")
        self._touch()

    def change_details(
        self,
        shipping_address: str | None = None,
        billing_address: str | None = None,
        payment_method: str | None = None,
    ) -> list[str]:
        """Change any of the addresses and the payment method together.

        Every given value is checked before any is applied. Returns the
        names of the fields that were changed.
        """
        updates: dict[str, str] = {}
        if shipping_address is not None:
            updates["shipping_address"] = _required(
                shipping_address, InvalidShippingAddressError, "Shipping address"
            )
        if billing_address is not None:
            updates["billing_address"] = _required(
                billing_address, InvalidBillingAddressError, "Billing address"
            )
        if payment_method is not None:
            updates["payment_method"] = _required(
                payment_method, InvalidPaymentMethodError, "Payment method"
            )
        if not updates:
            return []

        for name, value in updates.items():
            setattr(self, name, value)
        self._touch()
        return list(updates)

    # --- Queries --------------------------------------------------------------

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity.value for item in self.items)

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING

    @property
    def is_paid(self) -> bool:
        return self.status == OrderStatus.PAID

    @property
    def is_shipped(self) -> bool:
        return self.status == OrderStatus.SHIPPED

    @property
    def is_delivered(self) -> bool:
        return self.status == OrderStatus.DELIVERED

    @property
    def is_cancelled(self) -> bool:
        return self.status == OrderStatus.CANCELLED

    def get_item(self, line_id: str) -> OrderLineItem:
        for item in self.items:
            if item.id.value == line_id:
                return item
        raise ItemNotFoundError(f"Line item '{line_id}' not found in order {self.id}")

    # --- Internal helpers -----------------------------------------------------

    def _assert_modifiable(self) -> None:
        if self.status != OrderStatus.PENDING:
            raise OrderNotModifiableError(
                f"Cannot modify order in {self.status.value} status, expected pending"
            )

    def _recalculate_total(self) -> None:
        self.total_amount = _sum_lines(self.items)

    def _touch(self) -> datetime:
        now = max(self.clock(), self.updated_at)
        self.updated_at = now
        return now


def _sum_lines(items: list[OrderLineItem]) -> Money:
    # always from scratch, never adjusted incrementally
    total = Money.zero()
    for item in items:
        total = total + item.line_total
    return total


def _required(value: str, error: type[Exception], label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise error(f"{label} is required")
    return value.strip()
