"""Integration tests for the RegisterPurchase use case."""

import pytest

from pantry.application.dto import PurchaseItemInput
from pantry.application.register_purchase import RegisterPurchaseHandler
from pantry.domain.exceptions import (
    EmptyPurchaseError,
    InvalidFormatError,
    NonPositiveQuantityError,
    ProductNotFoundError,
)
from pantry.domain.model.inventory import InventoryItem
from pantry.domain.model.product import Product
from pantry.domain.model.value_objects import ProductId, Quantity, StockLevel, UnitType
from tests.fakes import FakeInventoryRepository, FakeProductRepository

MILK = "a1b2c3d4-e5f6-4a5b-8c9d-0e1f2a3b4c5d"
RICE = "b2c3d4e5-f6a7-4b5c-9d0e-1f2a3b4c5d6e"
UNKNOWN = "c3d4e5f6-a7b8-4c5d-8e1f-2a3b4c5d6e7f"


def _setup():
    product_repo = FakeProductRepository(
        [
            Product(ProductId(MILK), "Milk", UnitType.LITERS),
            Product(ProductId(RICE), "Rice", UnitType.KG),
        ]
    )
    inventory_repo = FakeInventoryRepository(
        [
            InventoryItem(
                ProductId(MILK), Quantity(5), UnitType.LITERS, stock_level=StockLevel.LOW
            )
        ]
    )
    return RegisterPurchaseHandler(product_repo, inventory_repo), inventory_repo


class TestRegisterPurchaseHappyPath:

    def test_adds_to_existing_stock(self):
        handler, inventory_repo = _setup()
        handler.handle([PurchaseItemInput(MILK, 3)])
        assert inventory_repo.find_by_product_id(ProductId(MILK)).current_stock == Quantity(8)

    def test_creates_inventory_with_exact_quantity(self):
        handler, inventory_repo = _setup()
        handler.handle([PurchaseItemInput(RICE, 2)])

        item = inventory_repo.find_by_product_id(ProductId(RICE))
        assert item.current_stock == Quantity(2)
        assert item.unit_type == UnitType.KG
        assert item.stock_level == StockLevel.HIGH

    def test_stock_level_left_untouched(self):
        handler, inventory_repo = _setup()
        handler.handle([PurchaseItemInput(MILK, 10)])
        assert inventory_repo.find_by_product_id(ProductId(MILK)).stock_level == StockLevel.LOW

    def test_returns_purchase(self):
        handler, _ = _setup()
        purchase = handler.handle([PurchaseItemInput(MILK, 1), PurchaseItemInput(RICE, 4)])
        assert len(purchase.items) == 2
        assert purchase.total_quantity == 5

    def test_same_product_twice_accumulates(self):
        handler, inventory_repo = _setup()
        handler.handle([PurchaseItemInput(MILK, 1), PurchaseItemInput(MILK, 2)])
        assert inventory_repo.find_by_product_id(ProductId(MILK)).current_stock == Quantity(8)


class TestRegisterPurchaseValidation:

    def test_empty_purchase_rejected(self):
        handler, _ = _setup()
        with pytest.raises(EmptyPurchaseError):
            handler.handle([])

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_non_positive_quantity_rejected_without_writes(self, quantity):
        handler, inventory_repo = _setup()
        with pytest.raises(NonPositiveQuantityError):
            handler.handle([PurchaseItemInput(MILK, quantity)])
        assert inventory_repo.save_calls == 0
        assert inventory_repo.find_by_product_id(ProductId(MILK)).current_stock == Quantity(5)

    def test_unknown_product_rejected(self):
        handler, _ = _setup()
        with pytest.raises(ProductNotFoundError, match=UNKNOWN):
            handler.handle([PurchaseItemInput(UNKNOWN, 1)])

    def test_bad_id_rejected(self):
        handler, _ = _setup()
        with pytest.raises(InvalidFormatError):
            handler.handle([PurchaseItemInput("milk", 1)])

    def test_failure_on_later_item_writes_nothing(self):
        handler, inventory_repo = _setup()
        with pytest.raises(ProductNotFoundError):
            handler.handle([PurchaseItemInput(MILK, 3), PurchaseItemInput(UNKNOWN, 1)])
        assert inventory_repo.save_calls == 0
        assert inventory_repo.find_by_product_id(ProductId(MILK)).current_stock == Quantity(5)
        assert inventory_repo.find_by_product_id(ProductId(RICE)) is None
