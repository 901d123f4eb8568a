"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from shop.domain.model.cart import Cart, CartItem
from shop.domain.model.clock import Clock, system_clock
from shop.domain.model.value_objects import (
    CartId,
    LineItemId,
    ProductId,
    Quantity,
    UserId,
)
from shop.domain.repository.cart_repository import CartRepository


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path, clock: Clock = system_clock) -> None:
        self._file_path = file_path
        self._clock = clock
        self._ensure_file()

    # --- CartRepository interface ---------------------------------------------

    def get_by_id(self, cart_id: str) -> Cart | None:
        for raw in self._load_raw():
            if raw["id"] == cart_id:
                return self._to_domain(raw)
        return None

    def get_by_user_id(self, user_id: str) -> Cart | None:
        for raw in self._load_raw():
            if raw["user_id"] == user_id:
                return self._to_domain(raw)
        return None

    def save(self, cart: Cart) -> None:
        carts = [raw for raw in self._load_raw() if raw["id"] != cart.id.value]
        carts.append(self._to_raw(cart))
        self._persist_raw(carts)

    def delete(self, cart_id: str) -> None:
        carts = self._load_raw()
        remaining = [raw for raw in carts if raw["id"] != cart_id]
        if len(remaining) != len(carts):
            self._persist_raw(remaining)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "id": cart.id.value,
            "user_id": cart.user_id.value,
            "created_at": cart.created_at.isoformat(),
            "updated_at": cart.updated_at.isoformat(),
            "items": [
                {
                    "id": item.id.value,
                    "product_id": item.product_id.value,
                    "quantity": item.quantity.value,
                    "created_at": item.created_at.isoformat(),
                    "updated_at": item.updated_at.isoformat(),
                }
                for item in cart.items
            ],
        }

    def _to_domain(self, raw: dict) -> Cart:
        items = [
            CartItem(
                id=LineItemId(i["id"]),
                product_id=ProductId(i["product_id"]),
                quantity=Quantity(i["quantity"]),
                created_at=datetime.fromisoformat(i["created_at"]),
                updated_at=datetime.fromisoformat(i["updated_at"]),
            )
            for i in raw["items"]
        ]
        return Cart(
            id=CartId(raw["id"]),
            user_id=UserId(raw["user_id"]),
            items=items,
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
            clock=self._clock,
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, carts: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(carts, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
