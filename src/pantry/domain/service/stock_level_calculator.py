"""Domain service: Stock Level Calculator.

Pure mapping from a StockLevel to what the rest of the system needs to
know about it: whether the product must be restocked, and how the level
is displayed. The percentages are band midpoints for a gauge, not literal
stock fractions.
"""

from __future__ import annotations

from pantry.domain.model.value_objects import StockLevel

_RESTOCK_LEVELS = frozenset({StockLevel.LOW, StockLevel.EMPTY})

_LEVEL_COLORS: dict[StockLevel, str] = {
    StockLevel.HIGH: "green",
    StockLevel.MEDIUM: "yellow",
    StockLevel.LOW: "red",
    StockLevel.EMPTY: "gray",
}

_LEVEL_PERCENTAGES: dict[StockLevel, float] = {
    StockLevel.HIGH: 87.5,
    StockLevel.MEDIUM: 50.0,
    StockLevel.LOW: 12.5,
    StockLevel.EMPTY: 0.0,
}


class StockLevelCalculator:

    def should_add_to_shopping_list(self, level: StockLevel) -> bool:
        return level in _RESTOCK_LEVELS

    def level_color(self, level: StockLevel) -> str:
        return _LEVEL_COLORS[level]

    def level_percentage(self, level: StockLevel) -> float:
        return _LEVEL_PERCENTAGES[level]
