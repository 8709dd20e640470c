"""Purchase — a transient record of products bought in one trip.

A Purchase is validated and consumed by the RegisterPurchase use case;
only its effect on inventory is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from pantry.domain.exceptions import EmptyPurchaseError, NonPositiveQuantityError
from pantry.domain.model.value_objects import ProductId, PurchaseId, Quantity


@dataclass(frozen=True)
class PurchaseItem:

    product_id: ProductId
    quantity: Quantity

    def __post_init__(self) -> None:
        if self.quantity.value <= 0:
            raise NonPositiveQuantityError("Purchase quantity must be greater than 0")


@dataclass(frozen=True)
class Purchase:
    """Aggregate for a registered purchase.

    Use ``Purchase.create()`` for new purchases — it enforces that at least
    one item is present.
    """

    id: PurchaseId
    items: tuple[PurchaseItem, ...]
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(items: list[PurchaseItem]) -> Purchase:
        if not items:
            raise EmptyPurchaseError("Purchase must have at least one item")
        return Purchase(id=PurchaseId.generate(), items=tuple(items))

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity.value for item in self.items)
