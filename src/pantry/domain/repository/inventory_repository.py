"""Abstract repository for InventoryItem aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pantry.domain.model.inventory import InventoryItem
from pantry.domain.model.value_objects import ProductId


class InventoryRepository(ABC):

    @abstractmethod
    def save(self, item: InventoryItem) -> None:
        """Insert or replace the inventory record for the item's product."""

    @abstractmethod
    def find_by_product_id(self, product_id: ProductId) -> InventoryItem | None:
        """Return the inventory record for a product, or None."""

    @abstractmethod
    def find_all(self) -> list[InventoryItem]:
        """Return every inventory record."""

    @abstractmethod
    def delete(self, product_id: ProductId) -> None:
        """Drop the inventory record for a product, if any."""
