"""CLI commands for the Order aggregate."""

from __future__ import annotations

import json
from dataclasses import asdict

import click

from shop.application.change_order_status import ChangeOrderStatusHandler
from shop.application.delete_order import DeleteOrderHandler
from shop.application.dto import OrderDTO
from shop.application.list_orders import ListOrdersHandler
from shop.application.place_order import PlaceOrderHandler
from shop.application.remove_order_item import RemoveOrderItemHandler
from shop.application.show_order import ShowOrderHandler
from shop.application.update_order_details import UpdateOrderDetailsHandler
from shop.domain.exceptions import DomainException
from shop.domain.model.order import OrderStatus
from shop.infrastructure.bootstrap import (
    cart_repository,
    order_repository,
    product_repository,
)

_STATUS_CHOICES = [status.value for status in OrderStatus]


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"User:     {dto.user_id}")
    click.echo(f"Ship to:  {dto.shipping_address}")
    click.echo(f"Bill to:  {dto.billing_address}")
    click.echo(f"Payment:  {dto.payment_method}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()

    click.echo(f"  {'Line':<36} {'Product':<36} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*101}")
    for item in dto.items:
        click.echo(
            f"  {item.id:<36} {item.product_id:<36} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*101}")
    click.echo(f"  {'Order Total':<80} {dto.total_amount:>20}")


@click.command("checkout")
@click.option("--user", "user_id", required=True, help="User whose cart is checked out.")
@click.option("--ship-to", "shipping_address", required=True, help="Shipping address.")
@click.option("--bill-to", "billing_address", required=True, help="Billing address.")
@click.option("--payment", "payment_method", required=True, help="Payment method.")
def order_checkout(
    user_id: str,
    shipping_address: str,
    billing_address: str,
    payment_method: str,
) -> None:
    """Turn the user's cart into a pending order."""
    handler = PlaceOrderHandler(
        order_repo=order_repository(),
        cart_repo=cart_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(
            user_id=user_id,
            shipping_address=shipping_address,
            billing_address=billing_address,
            payment_method=payment_method,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} placed  (status={dto.status}, total={dto.total_amount})")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print as JSON.")
def order_show(order_id: str, as_json: bool) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        click.echo(json.dumps(asdict(dto), indent=2))
    else:
        _display_order(dto)


@click.command("list")
@click.option("--user", "user_id", default=None, help="Only this user's orders.")
@click.option("--status", type=click.Choice(_STATUS_CHOICES), default=None, help="Only orders in this status.")
@click.option("--limit", type=int, default=50, show_default=True)
@click.option("--offset", type=int, default=0, show_default=True)
def order_list(user_id: str | None, status: str | None, limit: int, offset: int) -> None:
    """List orders."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        dtos = handler.handle(user_id=user_id, status=status, limit=limit, offset=offset)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<36} {'User':<20} {'Status':<10} {'Lines':>5} {'Total':>12}")
    click.echo("-" * 87)
    for dto in dtos:
        click.echo(
            f"{dto.id:<36} {dto.user_id:<20} {dto.status:<10} "
            f"{len(dto.items):>5} {dto.total_amount:>12}"
        )


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.argument("new_status")
def order_status(order_id: str, new_status: str) -> None:
    """Move an order to NEW_STATUS (pending, paid, shipped, delivered, cancelled)."""
    handler = ChangeOrderStatusHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, new_status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} is now {dto.status}.")


@click.command("update")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--ship-to", "shipping_address", default=None, help="New shipping address.")
@click.option("--bill-to", "billing_address", default=None, help="New billing address.")
@click.option("--payment", "payment_method", default=None, help="New payment method.")
def order_update(
    order_id: str,
    shipping_address: str | None,
    billing_address: str | None,
    payment_method: str | None,
) -> None:
    """Change an order's addresses or payment method."""
    handler = UpdateOrderDetailsHandler(order_repo=order_repository())

    try:
        handler.handle(
            order_id,
            shipping_address=shipping_address,
            billing_address=billing_address,
            payment_method=payment_method,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} updated.")


@click.command("remove-item")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--line", "line_id", required=True, help="Line item ID to remove.")
def order_remove_item(order_id: str, line_id: str) -> None:
    """Remove a line from a pending order."""
    handler = RemoveOrderItemHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, line_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Line {line_id} removed — order total is now {dto.total_amount}.")


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.confirmation_option(prompt="Orders are kept for audit. Delete anyway?")
def order_delete(order_id: str) -> None:
    """Delete an order record (administrative)."""
    handler = DeleteOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {order_id} deleted.")
