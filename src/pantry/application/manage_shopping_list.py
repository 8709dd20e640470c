"""Application services: shopping-list queries and per-item mutations."""

from __future__ import annotations

import structlog

from pantry.domain.model.shopping_list import ShoppingListItem
from pantry.domain.model.value_objects import ProductId
from pantry.domain.repository.shopping_list_repository import ShoppingListRepository

logger = structlog.get_logger(__name__)


class ShowShoppingListHandler:

    def __init__(self, shopping_list_repo: ShoppingListRepository) -> None:
        self._shopping_list_repo = shopping_list_repo

    def handle(self) -> list[ShoppingListItem]:
        return self._shopping_list_repo.find_all()


class GetCheckedItemsHandler:

    def __init__(self, shopping_list_repo: ShoppingListRepository) -> None:
        self._shopping_list_repo = shopping_list_repo

    def handle(self) -> list[ShoppingListItem]:
        return self._shopping_list_repo.get_checked_items()


class ToggleShoppingListItemHandler:

    def __init__(self, shopping_list_repo: ShoppingListRepository) -> None:
        self._shopping_list_repo = shopping_list_repo

    def handle(self, product_id: str) -> ShoppingListItem | None:
        """Flip the checked flag and return the item as stored afterwards.

        Returns None when the product is not on the list.
        """
        pid = ProductId.from_string(product_id)
        self._shopping_list_repo.toggle_checked(pid)
        return self._shopping_list_repo.find_by_product_id(pid)


class MarkAsPurchasedHandler:
    """Take a product off the list once it has been bought."""

    def __init__(self, shopping_list_repo: ShoppingListRepository) -> None:
        self._shopping_list_repo = shopping_list_repo

    def handle(self, product_id: str) -> None:
        pid = ProductId.from_string(product_id)
        self._shopping_list_repo.remove(pid)
        logger.info("shopping_list_item_removed", product_id=pid.value)
