"""Application service: Delete Product use case.

Removes the product from the catalog, then drops its inventory row and
any shopping-list entry so no orphaned records remain.
"""

from __future__ import annotations

import structlog

from pantry.domain.exceptions import ProductNotFoundError
from pantry.domain.model.value_objects import ProductId
from pantry.domain.repository.inventory_repository import InventoryRepository
from pantry.domain.repository.product_repository import ProductRepository
from pantry.domain.repository.shopping_list_repository import ShoppingListRepository

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        inventory_repo: InventoryRepository,
        shopping_list_repo: ShoppingListRepository,
    ) -> None:
        self._product_repo = product_repo
        self._inventory_repo = inventory_repo
        self._shopping_list_repo = shopping_list_repo

    def handle(self, product_id: str) -> None:
        pid = ProductId.from_string(product_id)
        if self._product_repo.find_by_id(pid) is None:
            raise ProductNotFoundError(product_id)

        self._product_repo.delete(pid)
        self._inventory_repo.delete(pid)
        self._shopping_list_repo.remove(pid)

        logger.info("product_deleted", product_id=pid.value)
