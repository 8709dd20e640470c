"""Integration tests for the UpdateStockLevel use case."""

import pytest

from pantry.application.update_stock_level import UpdateStockLevelHandler
from pantry.domain.exceptions import (
    InvalidFormatError,
    InvalidStockLevelError,
    ProductNotFoundInInventoryError,
)
from pantry.domain.model.inventory import InventoryItem
from pantry.domain.model.shopping_list import ShoppingListItem, ShoppingListReason
from pantry.domain.model.value_objects import ProductId, Quantity, StockLevel, UnitType
from tests.fakes import (
    FailingInventoryRepository,
    FakeInventoryRepository,
    FakeShoppingListRepository,
)

MILK = "a1b2c3d4-e5f6-4a5b-8c9d-0e1f2a3b4c5d"
UNKNOWN = "c3d4e5f6-a7b8-4c5d-8e1f-2a3b4c5d6e7f"


def _setup(shopping_items=None):
    inventory_repo = FakeInventoryRepository(
        [InventoryItem(ProductId(MILK), Quantity(3), UnitType.LITERS)]
    )
    shopping_repo = FakeShoppingListRepository(shopping_items)
    handler = UpdateStockLevelHandler(inventory_repo, shopping_repo)
    return handler, inventory_repo, shopping_repo


class TestInventoryUpdate:

    def test_level_is_persisted(self):
        handler, inventory_repo, _ = _setup()
        returned = handler.handle(MILK, "medium")

        stored = inventory_repo.find_by_product_id(ProductId(MILK))
        assert stored.stock_level == StockLevel.MEDIUM
        assert returned == stored

    def test_quantity_untouched(self):
        handler, inventory_repo, _ = _setup()
        handler.handle(MILK, "empty")
        assert inventory_repo.find_by_product_id(ProductId(MILK)).current_stock == Quantity(3)

    def test_unknown_product_rejected(self):
        handler, _, shopping_repo = _setup()
        with pytest.raises(ProductNotFoundInInventoryError, match="not found in inventory"):
            handler.handle(UNKNOWN, "low")
        assert shopping_repo.find_all() == []

    def test_invalid_level_rejected(self):
        handler, inventory_repo, _ = _setup()
        with pytest.raises(InvalidStockLevelError):
            handler.handle(MILK, "plenty")
        assert inventory_repo.find_by_product_id(ProductId(MILK)).stock_level == StockLevel.HIGH

    def test_invalid_id_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(InvalidFormatError):
            handler.handle("milk", "low")


class TestShoppingListSync:

    @pytest.mark.parametrize("level", ["low", "empty"])
    def test_low_levels_add_auto_item(self, level):
        handler, _, shopping_repo = _setup()
        handler.handle(MILK, level)

        item = shopping_repo.find_by_product_id(ProductId(MILK))
        assert item.reason == ShoppingListReason.AUTO
        assert item.stock_level == StockLevel(level)
        assert item.checked is False

    @pytest.mark.parametrize("level", ["medium", "high"])
    def test_high_levels_remove_item(self, level):
        handler, _, shopping_repo = _setup(
            [ShoppingListItem.create_auto(ProductId(MILK), StockLevel.LOW)]
        )
        handler.handle(MILK, level)
        assert shopping_repo.exists(ProductId(MILK)) is False

    @pytest.mark.parametrize("level", ["medium", "high"])
    def test_high_levels_without_entry_are_a_no_op(self, level):
        handler, _, shopping_repo = _setup()
        handler.handle(MILK, level)
        assert shopping_repo.find_all() == []

    def test_high_level_removes_manual_item_too(self):
        handler, _, shopping_repo = _setup([ShoppingListItem.create_manual(ProductId(MILK))])
        handler.handle(MILK, "high")
        assert shopping_repo.exists(ProductId(MILK)) is False

    def test_repeated_low_leaves_single_entry(self):
        handler, _, shopping_repo = _setup()
        handler.handle(MILK, "low")
        handler.handle(MILK, "low")
        assert len(shopping_repo.find_all()) == 1

    def test_low_then_empty_updates_recorded_level(self):
        handler, _, shopping_repo = _setup()
        handler.handle(MILK, "low")
        handler.handle(MILK, "empty")

        items = shopping_repo.find_all()
        assert len(items) == 1
        assert items[0].stock_level == StockLevel.EMPTY

    def test_low_replaces_manual_item_and_resets_checked(self):
        manual = ShoppingListItem.create_manual(ProductId(MILK)).with_checked(True)
        handler, _, shopping_repo = _setup([manual])
        handler.handle(MILK, "low")

        item = shopping_repo.find_by_product_id(ProductId(MILK))
        assert item.reason == ShoppingListReason.AUTO
        assert item.checked is False

    def test_failed_inventory_save_leaves_list_untouched(self):
        inventory_repo = FailingInventoryRepository(
            [InventoryItem(ProductId(MILK), Quantity(3), UnitType.LITERS)]
        )
        shopping_repo = FakeShoppingListRepository()
        handler = UpdateStockLevelHandler(inventory_repo, shopping_repo)

        with pytest.raises(OSError):
            handler.handle(MILK, "empty")
        assert shopping_repo.find_all() == []
