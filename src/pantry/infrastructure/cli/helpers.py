"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import click

from pantry.domain.exceptions import InvalidFormatError
from pantry.domain.model.value_objects import ProductId
from pantry.infrastructure.bootstrap import Container


def resolve_product_id(container: Container, ref: str) -> str:
    """Accept either a product UUID or a product name; return the UUID."""
    try:
        return ProductId.from_string(ref.strip()).value
    except InvalidFormatError:
        product = container.products.find_by_name(ref.strip())
    if product is None:
        raise click.ClickException(f"Product not found: '{ref}'")
    return product.id.value


def parse_item_quantities(container: Container, raw: str) -> dict[str, int]:
    """Parse 'Milk:2,Bread:1' into {product_id: quantity}.

    Repeated products are summed.
    """
    result: dict[str, int] = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'Product:Quantity'."
            )
        ref, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{ref}'."
            )
        product_id = resolve_product_id(container, ref)
        result[product_id] = result.get(product_id, 0) + qty
    return result


def product_names(container: Container) -> dict[str, str]:
    """Map product id -> name for display."""
    return {p.id.value: p.name for p in container.products.find_all()}
