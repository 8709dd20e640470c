"""Application service: Get Products Needing Restock use case (query)."""

from __future__ import annotations

from pantry.domain.model.inventory import InventoryItem
from pantry.domain.repository.inventory_repository import InventoryRepository
from pantry.domain.service.stock_level_calculator import StockLevelCalculator


class GetProductsNeedingRestockHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        calculator: StockLevelCalculator | None = None,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._calculator = calculator or StockLevelCalculator()

    def handle(self) -> list[InventoryItem]:
        return [
            item
            for item in self._inventory_repo.find_all()
            if self._calculator.should_add_to_shopping_list(item.stock_level)
        ]
