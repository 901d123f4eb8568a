"""In-memory fake repositories and clocks for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from shop.domain.model.cart import Cart
from shop.domain.model.order import Order, OrderStatus
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money, ProductId
from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.product_repository import ProductRepository

EPOCH = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class StepClock:
    """Returns EPOCH, then advances by *step* on every call."""

    def __init__(self, start: datetime = EPOCH, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current


def make_product(
    product_id: str = "P1",
    name: str = "Widget",
    price: str = "9.99",
    stock: int = 100,
) -> Product:
    return Product(
        id=ProductId(product_id),
        name=name,
        description=f"A {name.lower()}",
        price=Money.of(price),
        stock=stock,
        created_at=EPOCH,
        updated_at=EPOCH,
        clock=StepClock(),
    )


class FakeCartRepository(CartRepository):

    def __init__(self, carts: list[Cart] | None = None) -> None:
        self._store: dict[str, Cart] = {}
        for cart in carts or []:
            self._store[cart.id.value] = cart

    def get_by_id(self, cart_id: str) -> Cart | None:
        return self._store.get(cart_id)

    def get_by_user_id(self, user_id: str) -> Cart | None:
        for cart in self._store.values():
            if cart.user_id.value == user_id:
                return cart
        return None

    def save(self, cart: Cart) -> None:
        self._store[cart.id.value] = cart

    def delete(self, cart_id: str) -> None:
        self._store.pop(cart_id, None)


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[str, Order] = {}

    def get_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def list_by_user_id(self, user_id: str, limit: int = 50, offset: int = 0) -> list[Order]:
        matching = [o for o in self._store.values() if o.user_id.value == user_id]
        return matching[offset:offset + limit]

    def list_by_status(self, status: OrderStatus, limit: int = 50, offset: int = 0) -> list[Order]:
        matching = [o for o in self._store.values() if o.status == status]
        return matching[offset:offset + limit]

    def list_all(self, limit: int = 50, offset: int = 0) -> list[Order]:
        return list(self._store.values())[offset:offset + limit]

    def save(self, order: Order) -> None:
        self._store[order.id.value] = order

    def delete(self, order_id: str) -> None:
        self._store.pop(order_id, None)


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id.value] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.strip().lower():
                return p
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def search(self, query: str, limit: int = 50, offset: int = 0) -> list[Product]:
        matching = [p for p in self._store.values() if p.matches(query)]
        return matching[offset:offset + limit]

    def save(self, product: Product) -> None:
        self._store[product.id.value] = product

    def delete(self, product_id: str) -> None:
        self._store.pop(product_id, None)
