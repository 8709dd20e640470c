"""CLI commands for registering purchases."""

from __future__ import annotations

import click

from pantry.application.dto import PurchaseItemInput
from pantry.application.register_purchase import RegisterPurchaseHandler
from pantry.domain.exceptions import DomainException
from pantry.infrastructure.bootstrap import Container
from pantry.infrastructure.cli.helpers import parse_item_quantities


@click.command("register")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.pass_obj
def purchase_register(container: Container, items: str) -> None:
    """Register a purchase and add it to inventory."""
    quantities = parse_item_quantities(container, items)
    handler = RegisterPurchaseHandler(
        product_repo=container.products,
        inventory_repo=container.inventory,
    )

    try:
        purchase = handler.handle(
            [PurchaseItemInput(product_id=pid, quantity=qty) for pid, qty in quantities.items()]
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Purchase {purchase.id} registered: "
        f"{len(purchase.items)} product(s), {purchase.total_quantity} unit(s)."
    )
