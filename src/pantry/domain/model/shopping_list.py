"""ShoppingListItem — one entry on the derived shopping list.

Items are either system-owned (``AUTO``, created because the product's stock
level dropped) or user-owned (``MANUAL``). Only auto items remember the
stock level that triggered them.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum

from pantry.domain.exceptions import ValidationError
from pantry.domain.model.value_objects import ProductId, StockLevel


class ShoppingListReason(Enum):
    AUTO = "auto"
    MANUAL = "manual"


@dataclass(frozen=True)
class ShoppingListItem:

    product_id: ProductId
    reason: ShoppingListReason
    stock_level: StockLevel | None = None
    added_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    checked: bool = False

    def __post_init__(self) -> None:
        if self.reason == ShoppingListReason.AUTO and self.stock_level is None:
            raise ValidationError("Auto shopping list items require a stock level")
        if self.reason == ShoppingListReason.MANUAL and self.stock_level is not None:
            raise ValidationError("Manual shopping list items carry no stock level")

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create_auto(product_id: ProductId, stock_level: StockLevel) -> ShoppingListItem:
        return ShoppingListItem(
            product_id=product_id,
            reason=ShoppingListReason.AUTO,
            stock_level=stock_level,
        )

    @staticmethod
    def create_manual(product_id: ProductId) -> ShoppingListItem:
        return ShoppingListItem(product_id=product_id, reason=ShoppingListReason.MANUAL)

    # --- Queries --------------------------------------------------------------

    def is_auto_added(self) -> bool:
        return self.reason == ShoppingListReason.AUTO

    def should_remove_when_stock_high(self) -> bool:
        return self.is_auto_added()

    # --- Copy-with ------------------------------------------------------------

    def toggle_checked(self) -> ShoppingListItem:
        return replace(self, checked=not self.checked)

    def with_checked(self, checked: bool) -> ShoppingListItem:
        return replace(self, checked=checked)
