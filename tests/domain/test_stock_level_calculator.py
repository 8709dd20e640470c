"""Unit tests for the StockLevelCalculator domain service."""

import pytest

from pantry.domain.model.value_objects import StockLevel
from pantry.domain.service.stock_level_calculator import StockLevelCalculator


@pytest.fixture
def calculator():
    return StockLevelCalculator()


class TestShouldAddToShoppingList:

    @pytest.mark.parametrize("level", [StockLevel.LOW, StockLevel.EMPTY])
    def test_low_and_empty_need_restock(self, calculator, level):
        assert calculator.should_add_to_shopping_list(level) is True

    @pytest.mark.parametrize("level", [StockLevel.HIGH, StockLevel.MEDIUM])
    def test_high_and_medium_do_not(self, calculator, level):
        assert calculator.should_add_to_shopping_list(level) is False


class TestDisplay:

    @pytest.mark.parametrize(
        "level, color",
        [
            (StockLevel.HIGH, "green"),
            (StockLevel.MEDIUM, "yellow"),
            (StockLevel.LOW, "red"),
            (StockLevel.EMPTY, "gray"),
        ],
    )
    def test_level_color(self, calculator, level, color):
        assert calculator.level_color(level) == color

    @pytest.mark.parametrize(
        "level, percentage",
        [
            (StockLevel.HIGH, 87.5),
            (StockLevel.MEDIUM, 50),
            (StockLevel.LOW, 12.5),
            (StockLevel.EMPTY, 0),
        ],
    )
    def test_level_percentage(self, calculator, level, percentage):
        assert calculator.level_percentage(level) == percentage
