from pathlib import Path

import click

from pantry.infrastructure.bootstrap import build_container
from pantry.infrastructure.cli.inventory_commands import (
    inventory_level,
    inventory_restock,
    inventory_show,
)
from pantry.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from pantry.infrastructure.cli.purchase_commands import purchase_register
from pantry.infrastructure.cli.shopping_commands import (
    shopping_add,
    shopping_checked,
    shopping_finish,
    shopping_list,
    shopping_recalculate,
    shopping_remove,
    shopping_start,
    shopping_toggle,
)
from pantry.infrastructure.config import configure_logging, get_settings


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the data files (overrides PANTRY_DATA_DIR).",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None) -> None:
    """Pantry — household inventory and shopping list"""
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)
    ctx.obj = build_container(settings, data_dir=data_dir)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def inventory() -> None:
    """Manage stock and stock levels."""


@cli.group()
def purchase() -> None:
    """Register purchases."""


@cli.group()
def shopping() -> None:
    """Manage the shopping list."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
product.add_command(product_delete)
inventory.add_command(inventory_show)
inventory.add_command(inventory_level)
inventory.add_command(inventory_restock)
purchase.add_command(purchase_register)
shopping.add_command(shopping_list)
shopping.add_command(shopping_checked)
shopping.add_command(shopping_add)
shopping.add_command(shopping_toggle)
shopping.add_command(shopping_remove)
shopping.add_command(shopping_start)
shopping.add_command(shopping_finish)
shopping.add_command(shopping_recalculate)
