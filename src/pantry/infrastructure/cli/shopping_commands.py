"""CLI commands for the shopping list."""

from __future__ import annotations

import click

from pantry.application.add_manual_shopping_list_item import (
    AddManualShoppingListItemHandler,
)
from pantry.application.finish_shopping import FinishShoppingHandler
from pantry.application.manage_shopping_list import (
    GetCheckedItemsHandler,
    MarkAsPurchasedHandler,
    ShowShoppingListHandler,
    ToggleShoppingListItemHandler,
)
from pantry.application.recalculate_shopping_list import RecalculateShoppingListHandler
from pantry.application.start_shopping import StartShoppingHandler
from pantry.domain.exceptions import DomainException
from pantry.domain.model.shopping_list import ShoppingListItem
from pantry.infrastructure.bootstrap import Container
from pantry.infrastructure.cli.helpers import (
    parse_item_quantities,
    product_names,
    resolve_product_id,
)


def _display_items(container: Container, items: list[ShoppingListItem]) -> None:
    names = product_names(container)
    for item in items:
        mark = "[x]" if item.checked else "[ ]"
        name = names.get(item.product_id.value, item.product_id.value)
        detail = f"auto, {item.stock_level.value}" if item.stock_level else "manual"
        click.echo(f"{mark} {name:<20} ({detail})")


@click.command("list")
@click.pass_obj
def shopping_list(container: Container) -> None:
    """Show the shopping list."""
    items = ShowShoppingListHandler(container.shopping_list).handle()
    if not items:
        click.echo("Shopping list is empty.")
        return
    _display_items(container, items)


@click.command("checked")
@click.pass_obj
def shopping_checked(container: Container) -> None:
    """Show only the items already checked off."""
    items = GetCheckedItemsHandler(container.shopping_list).handle()
    if not items:
        click.echo("No items checked.")
        return
    _display_items(container, items)


@click.command("add")
@click.argument("product")
@click.pass_obj
def shopping_add(container: Container, product: str) -> None:
    """Add a product to the list by hand."""
    product_id = resolve_product_id(container, product)
    handler = AddManualShoppingListItemHandler(
        product_repo=container.products,
        shopping_list_repo=container.shopping_list,
    )

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"'{product}' added to the shopping list.")


@click.command("toggle")
@click.argument("product")
@click.pass_obj
def shopping_toggle(container: Container, product: str) -> None:
    """Check or uncheck an item."""
    product_id = resolve_product_id(container, product)
    try:
        item = ToggleShoppingListItemHandler(container.shopping_list).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if item is None:
        raise click.ClickException(f"'{product}' is not on the shopping list")
    click.echo(f"'{product}' {'checked' if item.checked else 'unchecked'}.")


@click.command("remove")
@click.argument("product")
@click.pass_obj
def shopping_remove(container: Container, product: str) -> None:
    """Remove an item from the list (mark it as purchased)."""
    product_id = resolve_product_id(container, product)
    try:
        MarkAsPurchasedHandler(container.shopping_list).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"'{product}' removed from the shopping list.")


@click.command("start")
@click.pass_obj
def shopping_start(container: Container) -> None:
    """Start a shopping trip (unchecks every item)."""
    StartShoppingHandler(container.shopping_list).handle()
    click.echo("Shopping started — all items unchecked.")


@click.command("finish")
@click.option(
    "--items", "items_str", default=None,
    help="Quantities bought as 'Product:Qty,...' (default 1 each).",
)
@click.pass_obj
def shopping_finish(container: Container, items_str: str | None) -> None:
    """Register checked items as purchased and rebuild the list."""
    quantities = parse_item_quantities(container, items_str) if items_str else None
    handler = FinishShoppingHandler(
        product_repo=container.products,
        inventory_repo=container.inventory,
        shopping_list_repo=container.shopping_list,
    )

    try:
        purchase = handler.handle(quantities)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Shopping finished: {len(purchase.items)} product(s) added to inventory."
    )


@click.command("recalculate")
@click.pass_obj
def shopping_recalculate(container: Container) -> None:
    """Rebuild the list from inventory stock levels (drops manual items)."""
    items = RecalculateShoppingListHandler(
        shopping_list_repo=container.shopping_list,
        inventory_repo=container.inventory,
    ).handle()
    click.echo(f"Shopping list rebuilt with {len(items)} item(s).")
