"""Application service: Update Stock Level use case.

This is the control point of the stock-level state machine. Any level may
move to any other level; after the inventory is saved, the shopping list
is brought in line with the new level:

- ``low`` / ``empty``  -> an auto item is upserted (replacing any entry,
  auto or manual, the product already had)
- ``medium`` / ``high`` -> any entry for the product is removed
"""

from __future__ import annotations

import structlog

from pantry.domain.exceptions import ProductNotFoundInInventoryError
from pantry.domain.model.inventory import InventoryItem
from pantry.domain.model.shopping_list import ShoppingListItem
from pantry.domain.model.value_objects import ProductId, StockLevel
from pantry.domain.repository.inventory_repository import InventoryRepository
from pantry.domain.repository.shopping_list_repository import ShoppingListRepository
from pantry.domain.service.stock_level_calculator import StockLevelCalculator

logger = structlog.get_logger(__name__)


class UpdateStockLevelHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        shopping_list_repo: ShoppingListRepository,
        calculator: StockLevelCalculator | None = None,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._shopping_list_repo = shopping_list_repo
        self._calculator = calculator or StockLevelCalculator()

    def handle(self, product_id: str, new_stock_level: str) -> InventoryItem:
        pid = ProductId.from_string(product_id)
        level = StockLevel.from_string(new_stock_level)

        item = self._inventory_repo.find_by_product_id(pid)
        if item is None:
            raise ProductNotFoundInInventoryError(product_id)

        updated = item.update_stock_level(level)
        # Inventory first: if this raises, the shopping list is left alone.
        self._inventory_repo.save(updated)
        self._sync_shopping_list(pid, level)

        logger.info(
            "stock_level_updated",
            product_id=pid.value,
            previous_level=item.stock_level.value,
            stock_level=level.value,
        )
        return updated

    def _sync_shopping_list(self, product_id: ProductId, level: StockLevel) -> None:
        if self._calculator.should_add_to_shopping_list(level):
            self._shopping_list_repo.add(ShoppingListItem.create_auto(product_id, level))
        else:
            self._shopping_list_repo.remove(product_id)
