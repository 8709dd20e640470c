"""Application services: catalog queries."""

from __future__ import annotations

from pantry.application.dto import ProductWithInventoryDTO
from pantry.domain.model.product import Product
from pantry.domain.model.value_objects import StockLevel
from pantry.domain.repository.inventory_repository import InventoryRepository
from pantry.domain.repository.product_repository import ProductRepository


class GetAllProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[Product]:
        return self._product_repo.find_all()


class GetProductsWithInventoryHandler:
    """Join every product with its inventory row, sorted by name."""

    def __init__(
        self,
        product_repo: ProductRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._inventory_repo = inventory_repo

    def handle(self) -> list[ProductWithInventoryDTO]:
        stock = {item.product_id: item for item in self._inventory_repo.find_all()}

        lines: list[ProductWithInventoryDTO] = []
        for product in self._product_repo.find_all():
            inv = stock.get(product.id)
            lines.append(
                ProductWithInventoryDTO(
                    id=product.id.value,
                    name=product.name,
                    quantity=inv.current_stock.value if inv else 0,
                    unit_type=product.unit_type.value,
                    stock_level=(inv.stock_level if inv else StockLevel.HIGH).value,
                )
            )

        lines.sort(key=lambda line: line.name.lower())
        return lines
