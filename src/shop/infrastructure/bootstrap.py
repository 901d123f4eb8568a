"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Settings come from the environment:

- ``SHOP_DATA_DIR``   directory holding the JSON stores
  (default: ``data/`` at the project root)
- ``SHOP_LOG_LEVEL``  DEBUG, INFO, WARNING or ERROR (default: WARNING)
- ``SHOP_LOG_FORMAT`` console or json (default: console)
"""

from __future__ import annotations

import os
from pathlib import Path

from shop.infrastructure.persistence.json_cart_repository import JsonCartRepository
from shop.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from shop.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    configured = os.environ.get("SHOP_DATA_DIR")
    return Path(configured) if configured else _DEFAULT_DATA_DIR


def log_level() -> str:
    return os.environ.get("SHOP_LOG_LEVEL", "WARNING")


def log_format() -> str:
    return os.environ.get("SHOP_LOG_FORMAT", "console")


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(data_dir() / "carts.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_dir() / "orders.json")
