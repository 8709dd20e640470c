"""JSON-store-backed implementation of InventoryRepository."""

from __future__ import annotations

from datetime import datetime, timezone

from pantry.domain.model.inventory import InventoryItem
from pantry.domain.model.value_objects import ProductId, Quantity, StockLevel, UnitType
from pantry.domain.repository.inventory_repository import InventoryRepository
from pantry.infrastructure.persistence.json_collection import JsonCollection
from pantry.infrastructure.storage.json_file_store import JsonFileStore

STORAGE_KEY = "inventory"


class JsonInventoryRepository(InventoryRepository):

    def __init__(self, store: JsonFileStore) -> None:
        self._collection: JsonCollection[ProductId, InventoryItem] = JsonCollection(
            store,
            STORAGE_KEY,
            identity=lambda item: item.product_id,
            to_raw=self._to_raw,
            to_domain=self._to_domain,
        )

    # --- InventoryRepository interface ----------------------------------------

    def save(self, item: InventoryItem) -> None:
        items = self._collection.load()
        items[item.product_id] = item
        self._collection.persist(items)

    def find_by_product_id(self, product_id: ProductId) -> InventoryItem | None:
        return self._collection.load().get(product_id)

    def find_all(self) -> list[InventoryItem]:
        return list(self._collection.load().values())

    def delete(self, product_id: ProductId) -> None:
        items = self._collection.load()
        if items.pop(product_id, None) is not None:
            self._collection.persist(items)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: InventoryItem) -> dict:
        return {
            "productId": item.product_id.value,
            "currentStock": item.current_stock.value,
            "unitType": item.unit_type.value,
            "stockLevel": item.stock_level.value,
            "lastUpdated": item.last_updated.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryItem:
        # Records written before stock levels existed carry neither field.
        last_updated = raw.get("lastUpdated")
        return InventoryItem(
            product_id=ProductId.from_string(raw["productId"]),
            current_stock=Quantity(raw["currentStock"]),
            unit_type=UnitType.from_string(raw.get("unitType", UnitType.UNITS.value)),
            stock_level=StockLevel.from_string(raw.get("stockLevel", StockLevel.HIGH.value)),
            last_updated=(
                datetime.fromisoformat(last_updated)
                if last_updated
                else datetime.now(timezone.utc)
            ),
        )
