import click

from shop.infrastructure.bootstrap import log_format, log_level
from shop.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_delete,
    cart_remove,
    cart_show,
    cart_update,
)
from shop.infrastructure.cli.order_commands import (
    order_checkout,
    order_delete,
    order_list,
    order_remove_item,
    order_show,
    order_status,
    order_update,
)
from shop.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_search,
    product_update,
)
from shop.infrastructure.logging import LOG_LEVELS, configure_logging


@click.group()
@click.option(
    "--log-level",
    "level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Overrides SHOP_LOG_LEVEL.",
)
def cli(level: str | None) -> None:
    """Shop — carts, orders and the product catalog"""
    try:
        configure_logging(level=level or log_level(), log_format=log_format())
    except ValueError as exc:
        raise click.UsageError(str(exc))


@cli.group()
def cart() -> None:
    """Manage a user's cart."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_delete)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
order.add_command(order_checkout)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_remove_item)
order.add_command(order_show)
order.add_command(order_status)
order.add_command(order_update)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_search)
product.add_command(product_update)
