"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import json
from dataclasses import asdict

import click

from shop.application.add_to_cart import AddToCartHandler
from shop.application.clear_cart import ClearCartHandler
from shop.application.delete_cart import DeleteCartHandler
from shop.application.dto import CartDTO
from shop.application.remove_from_cart import RemoveFromCartHandler
from shop.application.show_cart import ShowCartHandler
from shop.application.update_cart_item import UpdateCartItemHandler
from shop.domain.exceptions import DomainException
from shop.infrastructure.bootstrap import cart_repository, product_repository


def _display_cart(dto: CartDTO) -> None:
    click.echo(f"Cart {dto.id}  (user={dto.user_id})")
    if not dto.items:
        click.echo("  (empty)")
        return

    click.echo(f"  {'Product':<38} {'Qty':>5}")
    click.echo(f"  {'-'*44}")
    for item in dto.items:
        click.echo(f"  {item.product_id:<38} {item.quantity:>5}")
    click.echo(f"  {'-'*44}")
    click.echo(f"  {'Lines':<10} {dto.item_count:>5}   {'Units':<10} {dto.total_quantity:>5}")


@click.command("add")
@click.option("--user", "user_id", required=True, help="User ID owning the cart.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--qty", "quantity", required=True, type=int, help="Units to add.")
def cart_add(user_id: str, product_id: str, quantity: int) -> None:
    """Add a product to the cart (adds to any quantity already there)."""
    handler = AddToCartHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(user_id=user_id, product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("update")
@click.option("--user", "user_id", required=True, help="User ID owning the cart.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--qty", "quantity", required=True, type=int, help="New quantity.")
def cart_update(user_id: str, product_id: str, quantity: int) -> None:
    """Set a cart line to an exact quantity."""
    handler = UpdateCartItemHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(user_id=user_id, product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("remove")
@click.option("--user", "user_id", required=True, help="User ID owning the cart.")
@click.option("--product", "product_id", required=True, help="Product ID.")
def cart_remove(user_id: str, product_id: str) -> None:
    """Remove a product from the cart."""
    handler = RemoveFromCartHandler(cart_repo=cart_repository())

    try:
        dto = handler.handle(user_id=user_id, product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("clear")
@click.option("--user", "user_id", required=True, help="User ID owning the cart.")
def cart_clear(user_id: str) -> None:
    """Empty the cart."""
    handler = ClearCartHandler(cart_repo=cart_repository())

    try:
        handler.handle(user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart for {user_id} cleared.")


@click.command("delete")
@click.option("--user", "user_id", required=True, help="User ID owning the cart.")
def cart_delete(user_id: str) -> None:
    """Delete the cart entirely."""
    handler = DeleteCartHandler(cart_repo=cart_repository())

    try:
        handler.handle(user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart for {user_id} deleted.")


@click.command("show")
@click.option("--user", "user_id", required=True, help="User ID owning the cart.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print as JSON.")
def cart_show(user_id: str, as_json: bool) -> None:
    """Show the user's cart."""
    handler = ShowCartHandler(cart_repo=cart_repository())

    try:
        dto = handler.handle(user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        click.echo(json.dumps(asdict(dto), indent=2))
    else:
        _display_cart(dto)
