"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI (or any other transport) and the
application layer without exposing domain internals. Money goes out as
a plain decimal string and timestamps as ISO-8601 so the DTOs map
straight onto a JSON body.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.model.cart import Cart
from shop.domain.model.order import Order
from shop.domain.model.product import Product


@dataclass(frozen=True)
class CartItemDTO:
    id: str
    product_id: str
    quantity: int
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class CartDTO:
    id: str
    user_id: str
    items: list[CartItemDTO]
    item_count: int
    total_quantity: int
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class OrderLineItemDTO:
    id: str
    product_id: str
    quantity: int
    unit_price: str
    line_total: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as handed to the user."""

    id: str
    user_id: str
    status: str
    items: list[OrderLineItemDTO]
    total_amount: str
    shipping_address: str
    billing_address: str
    payment_method: str
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    price: str
    stock: int
    created_at: str
    updated_at: str


# --- Mapping ------------------------------------------------------------------


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        id=cart.id.value,
        user_id=cart.user_id.value,
        items=[
            CartItemDTO(
                id=item.id.value,
                product_id=item.product_id.value,
                quantity=item.quantity.value,
                created_at=item.created_at.isoformat(),
                updated_at=item.updated_at.isoformat(),
            )
            for item in cart.items
        ],
        item_count=cart.item_count,
        total_quantity=cart.total_quantity,
        created_at=cart.created_at.isoformat(),
        updated_at=cart.updated_at.isoformat(),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id.value,
        user_id=order.user_id.value,
        status=order.status.value,
        items=[
            OrderLineItemDTO(
                id=item.id.value,
                product_id=item.product_id.value,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price.amount),
                line_total=str(item.line_total.amount),
                created_at=item.created_at.isoformat(),
                updated_at=item.updated_at.isoformat(),
            )
            for item in order.items
        ],
        total_amount=str(order.total_amount.amount),
        shipping_address=order.shipping_address,
        billing_address=order.billing_address,
        payment_method=order.payment_method,
        created_at=order.created_at.isoformat(),
        updated_at=order.updated_at.isoformat(),
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id.value,
        name=product.name,
        description=product.description,
        price=str(product.price.amount),
        stock=product.stock,
        created_at=product.created_at.isoformat(),
        updated_at=product.updated_at.isoformat(),
    )
