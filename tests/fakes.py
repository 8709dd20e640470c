"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from pantry.domain.exceptions import ProductNotFoundError
from pantry.domain.model.inventory import InventoryItem
from pantry.domain.model.product import Product
from pantry.domain.model.shopping_list import ShoppingListItem
from pantry.domain.model.value_objects import ProductId
from pantry.domain.repository.inventory_repository import InventoryRepository
from pantry.domain.repository.product_repository import ProductRepository
from pantry.domain.repository.shopping_list_repository import ShoppingListRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[ProductId, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def find_all(self) -> list[Product]:
        return list(self._store.values())

    def find_by_id(self, product_id: ProductId) -> Product | None:
        return self._store.get(product_id)

    def find_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.lower():
                return p
        return None

    def delete(self, product_id: ProductId) -> None:
        if product_id not in self._store:
            raise ProductNotFoundError(product_id.value)
        del self._store[product_id]


class FakeInventoryRepository(InventoryRepository):

    def __init__(self, items: list[InventoryItem] | None = None) -> None:
        self._store: dict[ProductId, InventoryItem] = {}
        self.save_calls = 0
        for item in items or []:
            self._store[item.product_id] = item

    def save(self, item: InventoryItem) -> None:
        self.save_calls += 1
        self._store[item.product_id] = item

    def find_by_product_id(self, product_id: ProductId) -> InventoryItem | None:
        return self._store.get(product_id)

    def find_all(self) -> list[InventoryItem]:
        return list(self._store.values())

    def delete(self, product_id: ProductId) -> None:
        self._store.pop(product_id, None)


class FailingInventoryRepository(FakeInventoryRepository):
    """Reads work, every save raises."""

    def save(self, item: InventoryItem) -> None:
        raise OSError("disk full")


class FakeShoppingListRepository(ShoppingListRepository):

    def __init__(self, items: list[ShoppingListItem] | None = None) -> None:
        self._store: dict[ProductId, ShoppingListItem] = {}
        for item in items or []:
            self._store[item.product_id] = item

    def find_all(self) -> list[ShoppingListItem]:
        return list(self._store.values())

    def find_by_product_id(self, product_id: ProductId) -> ShoppingListItem | None:
        return self._store.get(product_id)

    def add(self, item: ShoppingListItem) -> None:
        self._store.pop(item.product_id, None)
        self._store[item.product_id] = item.with_checked(False)

    def remove(self, product_id: ProductId) -> None:
        self._store.pop(product_id, None)

    def exists(self, product_id: ProductId) -> bool:
        return product_id in self._store

    def toggle_checked(self, product_id: ProductId) -> None:
        if product_id in self._store:
            self._store[product_id] = self._store[product_id].toggle_checked()

    def update_checked(self, product_id: ProductId, checked: bool) -> None:
        if product_id in self._store:
            self._store[product_id] = self._store[product_id].with_checked(checked)

    def get_checked_items(self) -> list[ShoppingListItem]:
        return [item for item in self._store.values() if item.checked]

    def clear(self) -> None:
        self._store.clear()
