"""CLI commands for inventory and stock levels."""

from __future__ import annotations

import click

from pantry.application.get_products_needing_restock import (
    GetProductsNeedingRestockHandler,
)
from pantry.application.show_products import GetProductsWithInventoryHandler
from pantry.application.update_stock_level import UpdateStockLevelHandler
from pantry.domain.exceptions import DomainException
from pantry.domain.model.value_objects import StockLevel
from pantry.domain.service.stock_level_calculator import StockLevelCalculator
from pantry.infrastructure.bootstrap import Container
from pantry.infrastructure.cli.helpers import product_names, resolve_product_id


@click.command("show")
@click.pass_obj
def inventory_show(container: Container) -> None:
    """Show every product with its stock and level."""
    handler = GetProductsWithInventoryHandler(
        product_repo=container.products,
        inventory_repo=container.inventory,
    )
    lines = handler.handle()

    if not lines:
        click.echo("No products found.")
        return

    calculator = StockLevelCalculator()
    click.echo(f"{'Product':<20} {'Stock':>8} {'Unit':>8} {'Level':>8} {'Gauge':>7}")
    click.echo("-" * 55)
    for line in lines:
        level = StockLevel.from_string(line.stock_level)
        gauge = f"{calculator.level_percentage(level):g}%"
        click.echo(
            f"{line.name:<20} {line.quantity:>8} {line.unit_type:>8} "
            + click.style(f"{line.stock_level:>8}", fg=calculator.level_color(level))
            + f" {gauge:>7}"
        )


@click.command("level")
@click.argument("product")
@click.argument("level", type=click.Choice([lvl.value for lvl in StockLevel]))
@click.pass_obj
def inventory_level(container: Container, product: str, level: str) -> None:
    """Set the stock level of a product (keeps the shopping list in sync)."""
    product_id = resolve_product_id(container, product)
    handler = UpdateStockLevelHandler(
        inventory_repo=container.inventory,
        shopping_list_repo=container.shopping_list,
    )

    try:
        handler.handle(product_id=product_id, new_stock_level=level)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if StockLevelCalculator().should_add_to_shopping_list(StockLevel(level)):
        click.echo(f"Stock level set to {level} — added to shopping list.")
    else:
        click.echo(f"Stock level set to {level}.")


@click.command("restock")
@click.pass_obj
def inventory_restock(container: Container) -> None:
    """List products whose stock level is low or empty."""
    items = GetProductsNeedingRestockHandler(inventory_repo=container.inventory).handle()

    if not items:
        click.echo("Nothing needs restocking.")
        return

    names = product_names(container)
    for item in items:
        name = names.get(item.product_id.value, item.product_id.value)
        click.echo(f"{name:<20} {item.stock_level.value:>8}")
