"""InventoryItem aggregate — tracks stock for a single product.

Each product has at most one InventoryItem. It carries two independent
notions of "how much is left": the numeric ``current_stock`` changed by
purchases, and the coarse ``stock_level`` set explicitly by the user.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from pantry.domain.model.value_objects import ProductId, Quantity, StockLevel, UnitType


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class InventoryItem:
    """Aggregate root for inventory tracking.

    Both update methods return a new instance with ``last_updated``
    refreshed; the receiver is never modified.
    """

    product_id: ProductId
    current_stock: Quantity
    unit_type: UnitType
    stock_level: StockLevel = StockLevel.HIGH
    last_updated: datetime = field(default_factory=_now)

    def update_stock(self, new_quantity: Quantity) -> InventoryItem:
        return replace(self, current_stock=new_quantity, last_updated=_now())

    def update_stock_level(self, new_level: StockLevel) -> InventoryItem:
        return replace(self, stock_level=new_level, last_updated=_now())

    def add_stock(self, purchased: Quantity) -> InventoryItem:
        """Return an item holding the existing stock plus *purchased*."""
        return self.update_stock(self.current_stock + purchased)
