"""JSON-file-backed implementation of OrderRepository.

``total_amount`` is written out for readers of the file but ignored on
load: the Order recomputes it from its lines.
"""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from shop.domain.model.clock import Clock, system_clock
from shop.domain.model.order import Order, OrderLineItem, OrderStatus
from shop.domain.model.value_objects import (
    LineItemId,
    Money,
    OrderId,
    ProductId,
    Quantity,
    UserId,
)
from shop.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path, clock: Clock = system_clock) -> None:
        self._file_path = file_path
        self._clock = clock
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_by_user_id(self, user_id: str, limit: int = 50, offset: int = 0) -> list[Order]:
        matching = [raw for raw in self._load_raw() if raw["user_id"] == user_id]
        return [self._to_domain(raw) for raw in matching[offset:offset + limit]]

    def list_by_status(self, status: OrderStatus, limit: int = 50, offset: int = 0) -> list[Order]:
        matching = [raw for raw in self._load_raw() if raw["status"] == status.value]
        return [self._to_domain(raw) for raw in matching[offset:offset + limit]]

    def list_all(self, limit: int = 50, offset: int = 0) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()[offset:offset + limit]]

    def save(self, order: Order) -> None:
        orders = self._load_raw()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(orders):
            if raw["id"] == order.id.value:
                orders[i] = self._to_raw(order)
                replaced = True
                break
        if not replaced:
            orders.append(self._to_raw(order))

        self._persist_raw(orders)

    def delete(self, order_id: str) -> None:
        orders = self._load_raw()
        remaining = [raw for raw in orders if raw["id"] != order_id]
        if len(remaining) != len(orders):
            self._persist_raw(remaining)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id.value,
            "user_id": order.user_id.value,
            "status": order.status.value,
            "shipping_address": order.shipping_address,
            "billing_address": order.billing_address,
            "payment_method": order.payment_method,
            "total_amount": str(order.total_amount.amount),
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat(),
            "items": [
                {
                    "id": item.id.value,
                    "product_id": item.product_id.value,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                    "created_at": item.created_at.isoformat(),
                    "updated_at": item.updated_at.isoformat(),
                }
                for item in order.items
            ],
        }

    def _to_domain(self, raw: dict) -> Order:
        items = [
            OrderLineItem(
                id=LineItemId(i["id"]),
                product_id=ProductId(i["product_id"]),
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
                created_at=datetime.fromisoformat(i["created_at"]),
                updated_at=datetime.fromisoformat(i["updated_at"]),
            )
            for i in raw["items"]
        ]
        return Order(
            id=OrderId(raw["id"]),
            user_id=UserId(raw["user_id"]),
            shipping_address=raw["shipping_address"],
            billing_address=raw["billing_address"],
            payment_method=raw["payment_method"],
            items=items,
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
            clock=self._clock,
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, orders: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(orders, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
