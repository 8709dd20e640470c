"""JSON-store-backed implementation of ShoppingListRepository."""

from __future__ import annotations

from datetime import datetime

from pantry.domain.model.shopping_list import ShoppingListItem, ShoppingListReason
from pantry.domain.model.value_objects import ProductId, StockLevel
from pantry.domain.repository.shopping_list_repository import ShoppingListRepository
from pantry.infrastructure.persistence.json_collection import JsonCollection
from pantry.infrastructure.storage.json_file_store import JsonFileStore

STORAGE_KEY = "shopping-list"


class JsonShoppingListRepository(ShoppingListRepository):

    def __init__(self, store: JsonFileStore) -> None:
        self._collection: JsonCollection[ProductId, ShoppingListItem] = JsonCollection(
            store,
            STORAGE_KEY,
            identity=lambda item: item.product_id,
            to_raw=self._to_raw,
            to_domain=self._to_domain,
        )

    # --- ShoppingListRepository interface -------------------------------------

    def find_all(self) -> list[ShoppingListItem]:
        return list(self._collection.load().values())

    def find_by_product_id(self, product_id: ProductId) -> ShoppingListItem | None:
        return self._collection.load().get(product_id)

    def add(self, item: ShoppingListItem) -> None:
        items = self._collection.load()
        # Replaced entries move to the end of the list.
        items.pop(item.product_id, None)
        items[item.product_id] = item.with_checked(False)
        self._collection.persist(items)

    def remove(self, product_id: ProductId) -> None:
        items = self._collection.load()
        if items.pop(product_id, None) is not None:
            self._collection.persist(items)

    def exists(self, product_id: ProductId) -> bool:
        return product_id in self._collection.load()

    def toggle_checked(self, product_id: ProductId) -> None:
        items = self._collection.load()
        item = items.get(product_id)
        if item is None:
            return
        items[product_id] = item.toggle_checked()
        self._collection.persist(items)

    def update_checked(self, product_id: ProductId, checked: bool) -> None:
        items = self._collection.load()
        item = items.get(product_id)
        if item is None:
            return
        items[product_id] = item.with_checked(checked)
        self._collection.persist(items)

    def get_checked_items(self) -> list[ShoppingListItem]:
        return [item for item in self._collection.load().values() if item.checked]

    def clear(self) -> None:
        self._collection.clear()

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: ShoppingListItem) -> dict:
        raw: dict = {
            "productId": item.product_id.value,
            "reason": item.reason.value,
            "addedAt": item.added_at.isoformat(),
            "checked": item.checked,
        }
        if item.stock_level is not None:
            raw["stockLevel"] = item.stock_level.value
        return raw

    @staticmethod
    def _to_domain(raw: dict) -> ShoppingListItem:
        reason = ShoppingListReason(raw["reason"])
        level = raw.get("stockLevel")
        # An auto record that lost its level is read back as manual.
        if reason == ShoppingListReason.AUTO and level:
            reason, stock_level = ShoppingListReason.AUTO, StockLevel.from_string(level)
        else:
            reason, stock_level = ShoppingListReason.MANUAL, None
        return ShoppingListItem(
            product_id=ProductId.from_string(raw["productId"]),
            reason=reason,
            stock_level=stock_level,
            added_at=datetime.fromisoformat(raw["addedAt"]),
            checked=bool(raw.get("checked", False)),
        )
