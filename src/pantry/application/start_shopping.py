"""Application service: Start Shopping use case.

Unchecks every item on the list so a new trip starts from a clean slate.
Reason, stock level and product are left untouched.
"""

from __future__ import annotations

import structlog

from pantry.domain.repository.shopping_list_repository import ShoppingListRepository

logger = structlog.get_logger(__name__)


class StartShoppingHandler:

    def __init__(self, shopping_list_repo: ShoppingListRepository) -> None:
        self._shopping_list_repo = shopping_list_repo

    def handle(self) -> None:
        items = self._shopping_list_repo.find_all()
        for item in items:
            self._shopping_list_repo.update_checked(item.product_id, False)
        logger.info("shopping_started", items=len(items))
