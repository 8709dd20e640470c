"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from pantry.application.add_product import AddProductToInventoryHandler
from pantry.application.delete_product import DeleteProductHandler
from pantry.application.show_products import GetAllProductsHandler
from pantry.application.update_product import UpdateProductHandler
from pantry.domain.exceptions import DomainException
from pantry.domain.model.value_objects import ProductId, UnitType
from pantry.infrastructure.bootstrap import Container
from pantry.infrastructure.cli.helpers import resolve_product_id

_UNIT_CHOICES = click.Choice([u.value for u in UnitType])


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", default=0, show_default=True, type=int, help="Initial stock.")
@click.option("--unit", default="units", show_default=True, type=_UNIT_CHOICES)
@click.pass_obj
def product_add(container: Container, name: str, quantity: int, unit: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductToInventoryHandler(
        product_repo=container.products,
        inventory_repo=container.inventory,
    )

    try:
        product = handler.handle(name=name, initial_quantity=quantity, unit_type=unit)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{product.name}' added ({product.id}) with {quantity} {unit}")


@click.command("list")
@click.pass_obj
def product_list(container: Container) -> None:
    """List all products in the catalog."""
    products = GetAllProductsHandler(product_repo=container.products).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<38} {'Name':<20} {'Unit':>8}")
    click.echo("-" * 68)
    for p in products:
        click.echo(f"{p.id.value:<38} {p.name:<20} {p.unit_type.value:>8}")


@click.command("update")
@click.argument("product")
@click.option("--name", default=None, help="New name.")
@click.option("--unit", default=None, type=_UNIT_CHOICES, help="New unit type.")
@click.pass_obj
def product_update(
    container: Container, product: str, name: str | None, unit: str | None
) -> None:
    """Rename a product or change its unit."""
    product_id = resolve_product_id(container, product)
    current = container.products.find_by_id(ProductId(product_id))
    if current is None:
        raise click.ClickException(f"Product with id {product_id} not found")

    handler = UpdateProductHandler(product_repo=container.products)
    try:
        updated = handler.handle(
            product_id=product_id,
            name=name if name is not None else current.name,
            unit_type=unit if unit is not None else current.unit_type.value,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} updated: '{updated.name}' ({updated.unit_type.value})")


@click.command("delete")
@click.argument("product")
@click.pass_obj
def product_delete(container: Container, product: str) -> None:
    """Delete a product along with its stock and list entries."""
    product_id = resolve_product_id(container, product)
    handler = DeleteProductHandler(
        product_repo=container.products,
        inventory_repo=container.inventory,
        shopping_list_repo=container.shopping_list,
    )

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted.")
