"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from shop.domain.model.clock import Clock, system_clock
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money, ProductId
from shop.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, clock: Clock = system_clock) -> None:
        self._file_path = file_path
        self._clock = clock
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        wanted = name.strip().lower()
        for product in self._load().values():
            if product.name.lower() == wanted:
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def search(self, query: str, limit: int = 50, offset: int = 0) -> list[Product]:
        matching = [p for p in self._load().values() if p.matches(query)]
        return matching[offset:offset + limit]

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id.value] = product
        self._persist(products)

    def delete(self, product_id: str) -> None:
        products = self._load()
        if products.pop(product_id, None) is not None:
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["id"]: self._to_domain(item) for item in raw}

    def _to_domain(self, item: dict) -> Product:
        created_at = datetime.fromisoformat(item["created_at"])
        return Product(
            id=ProductId(item["id"]),
            name=item["name"],
            description=item.get("description", ""),
            price=Money(Decimal(item["price"]), item.get("currency", "USD")),
            stock=item.get("stock", 0),
            created_at=created_at,
            updated_at=datetime.fromisoformat(item.get("updated_at", item["created_at"])),
            clock=self._clock,
        )

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id.value,
                "name": p.name,
                "description": p.description,
                "price": str(p.price.amount),
                "currency": p.price.currency,
                "stock": p.stock,
                "created_at": p.created_at.isoformat(),
                "updated_at": p.updated_at.isoformat(),
            }
            for p in products.values()
        ]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
