"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PurchaseItemInput:
    """Input: one line of a purchase (raw product id + quantity bought)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class ProductWithInventoryDTO:
    """Output: a product joined with its inventory row."""

    id: str
    name: str
    quantity: int  # 0 when the product has no inventory row yet
    unit_type: str
    stock_level: str
