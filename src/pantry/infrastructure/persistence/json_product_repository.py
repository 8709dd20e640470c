"""JSON-store-backed implementation of ProductRepository."""

from __future__ import annotations

from pantry.domain.exceptions import ProductNotFoundError
from pantry.domain.model.product import Product
from pantry.domain.model.value_objects import ProductId, UnitType
from pantry.domain.repository.product_repository import ProductRepository
from pantry.infrastructure.persistence.json_collection import JsonCollection
from pantry.infrastructure.storage.json_file_store import JsonFileStore

STORAGE_KEY = "products"


class JsonProductRepository(ProductRepository):

    def __init__(self, store: JsonFileStore) -> None:
        self._collection: JsonCollection[ProductId, Product] = JsonCollection(
            store,
            STORAGE_KEY,
            identity=lambda p: p.id,
            to_raw=self._to_raw,
            to_domain=self._to_domain,
        )

    # --- ProductRepository interface ------------------------------------------

    def save(self, product: Product) -> None:
        products = self._collection.load()
        products[product.id] = product
        self._collection.persist(products)

    def find_all(self) -> list[Product]:
        return list(self._collection.load().values())

    def find_by_id(self, product_id: ProductId) -> Product | None:
        return self._collection.load().get(product_id)

    def find_by_name(self, name: str) -> Product | None:
        for product in self._collection.load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def delete(self, product_id: ProductId) -> None:
        products = self._collection.load()
        if product_id not in products:
            raise ProductNotFoundError(product_id.value)
        del products[product_id]
        self._collection.persist(products)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id.value,
            "name": product.name,
            "unitType": product.unit_type.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=ProductId.from_string(raw["id"]),
            name=raw["name"],
            unit_type=UnitType.from_string(raw.get("unitType", UnitType.UNITS.value)),
        )
