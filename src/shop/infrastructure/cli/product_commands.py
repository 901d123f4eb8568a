"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from shop.application.add_product import AddProductHandler
from shop.application.delete_product import DeleteProductHandler
from shop.application.dto import ProductDTO
from shop.application.search_products import DEFAULT_PAGE_SIZE, SearchProductsHandler
from shop.application.update_product import UpdateProductHandler
from shop.domain.exceptions import DomainException
from shop.infrastructure.bootstrap import product_repository


def _display_table(rows: list[tuple[str, str, str, int]]) -> None:
    click.echo(f"{'ID':<36} {'Name':<20} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 76)
    for product_id, name, price, stock in rows:
        click.echo(f"{product_id:<36} {name:<20} {price:>10} {stock:>7}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", type=int, default=0, show_default=True, help="Units in stock.")
def product_add(name: str, description: str, price: str, stock: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(name=name, description=description, price=price, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.name}' added at ${dto.price} ({dto.stock} in stock)")


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    repo = product_repository()
    products = repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    _display_table([(p.id.value, p.name, str(p.price), p.stock) for p in products])


@click.command("search")
@click.argument("query")
@click.option("--limit", type=int, default=DEFAULT_PAGE_SIZE, show_default=True)
@click.option("--offset", type=int, default=0, show_default=True)
def product_search(query: str, limit: int, offset: int) -> None:
    """Find products whose name or description contains QUERY."""
    handler = SearchProductsHandler(product_repo=product_repository())

    try:
        dtos: list[ProductDTO] = handler.handle(query, limit=limit, offset=offset)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dtos:
        click.echo(f"No products match '{query}'.")
        return

    _display_table([(d.id, d.name, f"${d.price}", d.stock) for d in dtos])


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", type=int, default=None, help="New stock level.")
def product_update(
    product_id: str,
    name: str | None,
    description: str | None,
    price: str | None,
    stock: int | None,
) -> None:
    """Update a product's name, description, price or stock."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        dto = handler.handle(
            product_id=product_id,
            new_price=price,
            new_stock=stock,
            new_name=name,
            new_description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.name}' now ${dto.price} with {dto.stock} in stock")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.confirmation_option(prompt="Remove this product from the catalog?")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted.")
