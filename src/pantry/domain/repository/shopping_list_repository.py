"""Abstract repository for the shopping list.

The shopping list holds at most one item per product. ``add`` is an
upsert keyed by product id: it replaces whatever entry the product had,
and the stored item always starts unchecked.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pantry.domain.model.shopping_list import ShoppingListItem
from pantry.domain.model.value_objects import ProductId


class ShoppingListRepository(ABC):

    @abstractmethod
    def find_all(self) -> list[ShoppingListItem]:
        """Return every item on the list."""

    @abstractmethod
    def find_by_product_id(self, product_id: ProductId) -> ShoppingListItem | None:
        """Return the item for a product, or None."""

    @abstractmethod
    def add(self, item: ShoppingListItem) -> None:
        """Insert or replace the item for its product, unchecked."""

    @abstractmethod
    def remove(self, product_id: ProductId) -> None:
        """Remove the item for a product; no-op if absent."""

    @abstractmethod
    def exists(self, product_id: ProductId) -> bool:
        """Return True if the product is on the list."""

    @abstractmethod
    def toggle_checked(self, product_id: ProductId) -> None:
        """Flip ``checked`` for the product's item; no-op if absent."""

    @abstractmethod
    def update_checked(self, product_id: ProductId, checked: bool) -> None:
        """Set ``checked`` explicitly for the product's item; no-op if absent."""

    @abstractmethod
    def get_checked_items(self) -> list[ShoppingListItem]:
        """Return the items currently checked off."""

    @abstractmethod
    def clear(self) -> None:
        """Empty the list."""
