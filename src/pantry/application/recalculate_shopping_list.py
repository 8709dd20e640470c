"""Application service: Recalculate Shopping List use case.

Full reconciliation: the list is cleared (manual entries included) and
rebuilt from the current inventory stock levels. Used once a purchase has
been completed.
"""

from __future__ import annotations

import structlog

from pantry.domain.model.shopping_list import ShoppingListItem
from pantry.domain.repository.inventory_repository import InventoryRepository
from pantry.domain.repository.shopping_list_repository import ShoppingListRepository
from pantry.domain.service.stock_level_calculator import StockLevelCalculator

logger = structlog.get_logger(__name__)


class RecalculateShoppingListHandler:

    def __init__(
        self,
        shopping_list_repo: ShoppingListRepository,
        inventory_repo: InventoryRepository,
        calculator: StockLevelCalculator | None = None,
    ) -> None:
        self._shopping_list_repo = shopping_list_repo
        self._inventory_repo = inventory_repo
        self._calculator = calculator or StockLevelCalculator()

    def handle(self) -> list[ShoppingListItem]:
        discarded = len(self._shopping_list_repo.find_all())
        self._shopping_list_repo.clear()

        for item in self._inventory_repo.find_all():
            if self._calculator.should_add_to_shopping_list(item.stock_level):
                self._shopping_list_repo.add(
                    ShoppingListItem.create_auto(item.product_id, item.stock_level)
                )

        rebuilt = self._shopping_list_repo.find_all()
        logger.info(
            "shopping_list_recalculated",
            discarded_items=discarded,
            items=len(rebuilt),
        )
        return rebuilt
