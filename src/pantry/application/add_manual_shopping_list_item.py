"""Application service: Add Manual Shopping List Item use case.

Lets the user put a product on the list regardless of its stock level.
The product must exist (checked first) and must not already be on the
list (checked second).
"""

from __future__ import annotations

import structlog

from pantry.domain.exceptions import DuplicateInShoppingListError, ProductNotFoundError
from pantry.domain.model.shopping_list import ShoppingListItem
from pantry.domain.model.value_objects import ProductId
from pantry.domain.repository.product_repository import ProductRepository
from pantry.domain.repository.shopping_list_repository import ShoppingListRepository

logger = structlog.get_logger(__name__)


class AddManualShoppingListItemHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        shopping_list_repo: ShoppingListRepository,
    ) -> None:
        self._product_repo = product_repo
        self._shopping_list_repo = shopping_list_repo

    def handle(self, product_id: str) -> ShoppingListItem:
        pid = ProductId.from_string(product_id)

        if self._product_repo.find_by_id(pid) is None:
            raise ProductNotFoundError(product_id)
        if self._shopping_list_repo.exists(pid):
            raise DuplicateInShoppingListError(product_id)

        item = ShoppingListItem.create_manual(pid)
        self._shopping_list_repo.add(item)

        logger.info("manual_item_added", product_id=pid.value)
        return item
