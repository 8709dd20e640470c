"""Application service: Add Product To Inventory use case."""

from __future__ import annotations

import structlog

from pantry.domain.exceptions import DuplicateProductNameError
from pantry.domain.model.inventory import InventoryItem
from pantry.domain.model.product import Product
from pantry.domain.model.value_objects import ProductId, Quantity, UnitType
from pantry.domain.repository.inventory_repository import InventoryRepository
from pantry.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductToInventoryHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._inventory_repo = inventory_repo

    def handle(
        self,
        name: str,
        initial_quantity: int = 0,
        unit_type: str = "units",
        product_id: str | None = None,
    ) -> Product:
        """Add a new product to the catalog with an initial stock count.

        The name clash check runs first; every other value is validated
        before anything is written, so a rejected call leaves no trace.
        """
        if self._product_repo.find_by_name(name.strip()) is not None:
            raise DuplicateProductNameError(name.strip())

        pid = ProductId.from_string(product_id) if product_id else ProductId.generate()
        unit = UnitType.from_string(unit_type)
        product = Product(id=pid, name=name.strip(), unit_type=unit)
        quantity = Quantity(initial_quantity)

        self._product_repo.save(product)
        self._inventory_repo.save(
            InventoryItem(product_id=pid, current_stock=quantity, unit_type=unit)
        )

        logger.info(
            "product_added",
            product_id=pid.value,
            name=product.name,
            initial_quantity=quantity.value,
        )
        return product
